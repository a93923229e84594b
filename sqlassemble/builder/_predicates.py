"""Predicate text builders shared by the WHERE helpers and :class:`Where`.

Values are rendered as SQL literals: strings are quoted and escaped, numbers
are emitted as decimal text, ``None`` becomes ``NULL`` and :class:`Raw`
fragments pass through unchanged.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional, Union

from sqlassemble.core.compiler import render_query, strip_terminator
from sqlassemble.core.names import SqlName
from sqlassemble.core.parameters import render_literal
from sqlassemble.core.quoting import escape
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.builder._base import StatementBase

__all__ = (
    "and_",
    "between",
    "comparison",
    "in_list",
    "in_query",
    "is_not_null",
    "is_null",
    "like",
    "literal",
    "not_",
    "or_",
    "predicate_text",
    "query_text",
    "subquery",
)

ColumnLike = Union[str, SqlName]


def _column(column: ColumnLike) -> str:
    text = column.safe() if isinstance(column, SqlName) else str(column)
    if not text.strip():
        msg = "Column expression must not be empty."
        raise ModelError(msg)
    return text


def literal(value: Any) -> str:
    """Render a predicate value, reporting unsupported values as :class:`ModelError`."""
    try:
        return render_literal(value)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot use {value!r} as a SQL value: {exc}"
        raise ModelError(msg) from exc


def predicate_text(predicate: Any) -> str:
    text = str(predicate)
    if not text.strip():
        msg = "Predicate must not be empty."
        raise ModelError(msg)
    return text


def query_text(query: "Union[StatementBase, str]") -> str:
    """Render a nested query without its terminator."""
    if isinstance(query, str):
        text = strip_terminator(query)
        if not text:
            msg = "Nested query must not be empty."
            raise ModelError(msg)
        return text
    return render_query(query.state)


def comparison(column: ColumnLike, operator: str, value: Any) -> str:
    return f"{_column(column)} {operator} {literal(value)}"


def like(column: ColumnLike, mask: str, prefix: str = "", suffix: str = "", negate: bool = False) -> str:
    """``column [NOT] LIKE '<prefix><mask><suffix>'`` with ``mask`` escaped."""
    if not isinstance(mask, str):
        msg = f"LIKE mask must be a string, got {type(mask).__name__}"
        raise ModelError(msg)
    keyword = "NOT LIKE" if negate else "LIKE"
    return f"{_column(column)} {keyword} '{prefix}{escape(mask)}{suffix}'"


def is_null(column: ColumnLike) -> str:
    return f"{_column(column)} IS NULL"


def is_not_null(column: ColumnLike) -> str:
    return f"{_column(column)} IS NOT NULL"


def in_list(column: ColumnLike, values: Iterable[Any], negate: bool = False) -> str:
    """``column [NOT] IN (v1, v2, ...)``.

    Raises:
        ModelError: If ``values`` is a string or empty.
    """
    if isinstance(values, (str, bytes)):
        msg = "IN values must be a collection, not a string."
        raise ModelError(msg)
    rendered = [literal(v) for v in values]
    if not rendered:
        msg = "IN list must not be empty."
        raise ModelError(msg)
    keyword = "NOT IN" if negate else "IN"
    return f"{_column(column)} {keyword} ({', '.join(rendered)})"


def in_query(column: ColumnLike, query: "Union[StatementBase, str]", negate: bool = False) -> str:
    keyword = "NOT IN" if negate else "IN"
    return f"{_column(column)} {keyword} ({query_text(query)})"


def between(column: ColumnLike, low: Any, high: Any, negate: bool = False) -> str:
    keyword = "NOT BETWEEN" if negate else "BETWEEN"
    return f"{_column(column)} {keyword} {literal(low)} AND {literal(high)}"


def and_(*predicates: Any) -> str:
    """Join predicates with AND, each wrapped in parentheses.

    Example:
        >>> and_("a = 1", or_("b = 2", "c = 3"))
        '(a = 1) AND (b = 2 OR c = 3)'
    """
    if not predicates:
        msg = "and_() requires at least one predicate."
        raise ModelError(msg)
    return " AND ".join(f"({predicate_text(p)})" for p in predicates)


def or_(*predicates: Any) -> str:
    """Join predicates with OR."""
    if not predicates:
        msg = "or_() requires at least one predicate."
        raise ModelError(msg)
    return " OR ".join(predicate_text(p) for p in predicates)


def not_(predicate: Any) -> str:
    return f"NOT {predicate_text(predicate)}"


def subquery(query: "Union[StatementBase, str]", alias: Optional[str] = None) -> str:
    """Wrap a rendered query in parentheses for use as a field or table.

    A trailing ``;`` is dropped.

    Example:
        >>> subquery("SELECT id FROM books;", "b")
        '(SELECT id FROM books) AS b'
    """
    text = f"({query_text(query)})"
    return f"{text} AS {alias}" if alias else text
