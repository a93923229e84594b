"""Fluent builder for compound predicates."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Union

from typing_extensions import Self

from sqlassemble.builder import _predicates as p

if TYPE_CHECKING:
    from sqlassemble.builder._base import StatementBase
    from sqlassemble.core.names import SqlName

__all__ = ("Where",)


class Where:
    """Compose one predicate and render it with :func:`str`.

    Example:
        >>> str(Where("price").gt(100).and_(Where("title").like("Harry%")).in_brackets())
        "((price > 100) AND (title LIKE 'Harry%'))"
    """

    __slots__ = ("_column", "_text")

    def __init__(self, column: "Union[str, SqlName]") -> None:
        self._column = column
        self._text = p.predicate_text(column)

    def eq(self, value: Any) -> Self:
        self._text = p.comparison(self._column, "=", value)
        return self

    def ne(self, value: Any) -> Self:
        self._text = p.comparison(self._column, "<>", value)
        return self

    def gt(self, value: Any) -> Self:
        self._text = p.comparison(self._column, ">", value)
        return self

    def ge(self, value: Any) -> Self:
        self._text = p.comparison(self._column, ">=", value)
        return self

    def lt(self, value: Any) -> Self:
        self._text = p.comparison(self._column, "<", value)
        return self

    def le(self, value: Any) -> Self:
        self._text = p.comparison(self._column, "<=", value)
        return self

    def like(self, mask: str) -> Self:
        self._text = p.like(self._column, mask)
        return self

    def not_like(self, mask: str) -> Self:
        self._text = p.like(self._column, mask, negate=True)
        return self

    def is_null(self) -> Self:
        self._text = p.is_null(self._column)
        return self

    def is_not_null(self) -> Self:
        self._text = p.is_not_null(self._column)
        return self

    def in_(self, values: Iterable[Any]) -> Self:
        self._text = p.in_list(self._column, values)
        return self

    def not_in(self, values: Iterable[Any]) -> Self:
        self._text = p.in_list(self._column, values, negate=True)
        return self

    def in_query(self, query: "Union[StatementBase, str]") -> Self:
        self._text = p.in_query(self._column, query)
        return self

    def between(self, low: Any, high: Any) -> Self:
        self._text = p.between(self._column, low, high)
        return self

    def not_between(self, low: Any, high: Any) -> Self:
        self._text = p.between(self._column, low, high, negate=True)
        return self

    def and_(self, *others: Any) -> Self:
        """Combine with ``others`` as ``(self) AND (other) ...``."""
        self._text = p.and_(self._text, *others)
        return self

    def or_(self, *others: Any) -> Self:
        """Combine with ``others`` as ``self OR other ...``."""
        self._text = p.or_(self._text, *others)
        return self

    def not_(self) -> Self:
        self._text = p.not_(self._text)
        return self

    def in_brackets(self) -> Self:
        self._text = f"({self._text})"
        return self

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"
