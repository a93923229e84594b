"""Literal rendering for bound and inline values.

Values are a closed set: ``None``, ``bool``, ``int``, ``float``, ``Decimal``,
``str`` and :class:`Raw` fragments. Anything else is rejected with
:class:`TypeError` so callers can report it in their own error kind.
Numbers render as plain decimal text without an exponent.
"""

import math
from decimal import Decimal
from functools import singledispatch
from typing import Any, Union

from sqlassemble.core.names import SqlName
from sqlassemble.core.quoting import quote

__all__ = (
    "Raw",
    "SQLValue",
    "raw",
    "render_expression",
    "render_literal",
)


class Raw:
    """A prepared SQL fragment inserted verbatim wherever a value is rendered."""

    __slots__ = ("sql",)

    def __init__(self, sql: str) -> None:
        self.sql = str(sql)

    def __str__(self) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return self.sql == other.sql

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.sql))


SQLValue = Union[None, bool, int, float, Decimal, str, Raw]


def raw(sql: str) -> Raw:
    """Mark ``sql`` as a pass-through fragment."""
    return Raw(sql)


@singledispatch
def render_literal(value: Any) -> str:
    """Render ``value`` as SQL literal text.

    Raises:
        TypeError: If the value type has no literal form.
    """
    msg = f"Unsupported value type for SQL literal: {type(value).__name__}"
    raise TypeError(msg)


@render_literal.register(type(None))
def _render_none(value: None) -> str:
    return "NULL"


@render_literal.register(bool)
def _render_bool(value: bool) -> str:
    return "TRUE" if value else "FALSE"


@render_literal.register(int)
def _render_int(value: int) -> str:
    return str(int(value))


@render_literal.register(float)
def _render_float(value: float) -> str:
    if not math.isfinite(value):
        msg = f"Non-finite float has no SQL literal: {value!r}"
        raise ValueError(msg)
    text = repr(float(value))
    if "e" in text:
        # numbers render as plain decimal text, never 1e+16
        return format(Decimal(text), "f")
    return text


@render_literal.register(Decimal)
def _render_decimal(value: Decimal) -> str:
    if not value.is_finite():
        msg = f"Non-finite decimal has no SQL literal: {value!r}"
        raise ValueError(msg)
    return format(value, "f")


@render_literal.register(str)
def _render_str(value: str) -> str:
    return quote(value)


@render_literal.register(Raw)
def _render_raw(value: Raw) -> str:
    return value.sql


def render_expression(value: Any) -> str:
    """Render ``value`` where a SQL expression is expected.

    Plain strings are taken as expression text and emitted unchanged; every
    other value renders as a literal.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, SqlName):
        return value.safe()
    return render_literal(value)
