"""Logger access for sqlassemble.

Modules log under the ``sqlassemble`` namespace. The library never installs
handlers on import; applications call :func:`configure_logging` or attach
their own handlers to :data:`ROOT_LOGGER_NAME`.
"""

import logging
import sys
from typing import Optional, Union

__all__ = ("DEFAULT_FORMAT", "ROOT_LOGGER_NAME", "configure_logging", "get_logger")

ROOT_LOGGER_NAME = "sqlassemble"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``sqlassemble`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlassemble logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _level_number(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        msg = f"Unknown logging level: {level!r}"
        raise ValueError(msg)
    return number


def configure_logging(
    level: Union[int, str] = "INFO",
    handler: Optional[logging.Handler] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Send sqlassemble log records to ``handler``.

    Replaces any handlers installed on the sqlassemble logger before and stops
    propagation to the root logger.

    Args:
        level: Logging level name or number.
        handler: Destination handler, a stderr stream handler by default.
        fmt: Format string used when ``handler`` has no formatter.

    Raises:
        ValueError: If ``level`` is not a known level name.

    Returns:
        The configured sqlassemble logger.
    """
    logger = get_logger()
    logger.setLevel(_level_number(level))
    logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("sqlassemble logging configured at %s", logging.getLevelName(logger.level))
    return logger
