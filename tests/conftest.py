from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from sqlassemble import Statement, select_from
from sqlassemble.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture
def books_select() -> Statement:
    return select_from("books").field("title").field("price")


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
