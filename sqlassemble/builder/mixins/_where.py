from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.builder import _predicates as p
from sqlassemble.core.statement import Combinator, Predicate, StatementKind

if TYPE_CHECKING:
    from sqlassemble.builder._base import StatementBase
    from sqlassemble.builder._predicates import ColumnLike
    from sqlassemble.core.statement import StatementState

__all__ = ("GroupByClauseMixin", "HavingClauseMixin", "WhereClauseMixin")

_WHERE_KINDS = (StatementKind.SELECT, StatementKind.UPDATE, StatementKind.DELETE)


def _append(predicates: "list[Predicate]", combinator: Combinator, text: str) -> None:
    predicates.append(Predicate(text=text, combinator=combinator if predicates else None))


@trait
class WhereClauseMixin:
    """Mixin providing WHERE clause methods for SELECT, UPDATE, and DELETE statements.

    Each entry records the combinator linking it to the previous entry. The
    typed helpers build the predicate text themselves and render their values
    as SQL literals.
    """

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def _where(self, combinator: Combinator, text: str) -> Self:
        self._require_kind("WHERE", *_WHERE_KINDS)
        _append(self._state.wheres, combinator, text)
        return self

    def and_where(self, predicate: Any) -> Self:
        """Add a predicate joined with AND.

        Args:
            predicate: Predicate text or a :class:`Where` builder.

        Raises:
            ModelError: If the statement is an INSERT or the predicate is empty.

        Returns:
            The current builder instance for method chaining.
        """
        return self._where(Combinator.AND, p.predicate_text(predicate))

    def or_where(self, predicate: Any) -> Self:
        """Add a predicate joined with OR."""
        return self._where(Combinator.OR, p.predicate_text(predicate))

    # AND helpers
    def and_where_eq(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, "=", value))

    def and_where_ne(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, "<>", value))

    def and_where_gt(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, ">", value))

    def and_where_ge(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, ">=", value))

    def and_where_lt(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, "<", value))

    def and_where_le(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.AND, p.comparison(column, "<=", value))

    def and_where_like(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.AND, p.like(column, mask))

    def and_where_not_like(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.AND, p.like(column, mask, negate=True))

    def and_where_like_left(self, column: "ColumnLike", mask: str) -> Self:
        """``column LIKE 'mask%'``."""
        return self._where(Combinator.AND, p.like(column, mask, suffix="%"))

    def and_where_like_right(self, column: "ColumnLike", mask: str) -> Self:
        """``column LIKE '%mask'``."""
        return self._where(Combinator.AND, p.like(column, mask, prefix="%"))

    def and_where_like_any(self, column: "ColumnLike", mask: str) -> Self:
        """``column LIKE '%mask%'``."""
        return self._where(Combinator.AND, p.like(column, mask, prefix="%", suffix="%"))

    def and_where_is_null(self, column: "ColumnLike") -> Self:
        return self._where(Combinator.AND, p.is_null(column))

    def and_where_is_not_null(self, column: "ColumnLike") -> Self:
        return self._where(Combinator.AND, p.is_not_null(column))

    def and_where_in(self, column: "ColumnLike", values: Iterable[Any]) -> Self:
        return self._where(Combinator.AND, p.in_list(column, values))

    def and_where_not_in(self, column: "ColumnLike", values: Iterable[Any]) -> Self:
        return self._where(Combinator.AND, p.in_list(column, values, negate=True))

    def and_where_in_query(self, column: "ColumnLike", query: "Union[StatementBase, str]") -> Self:
        return self._where(Combinator.AND, p.in_query(column, query))

    def and_where_not_in_query(self, column: "ColumnLike", query: "Union[StatementBase, str]") -> Self:
        return self._where(Combinator.AND, p.in_query(column, query, negate=True))

    def and_where_between(self, column: "ColumnLike", low: Any, high: Any) -> Self:
        return self._where(Combinator.AND, p.between(column, low, high))

    def and_where_not_between(self, column: "ColumnLike", low: Any, high: Any) -> Self:
        return self._where(Combinator.AND, p.between(column, low, high, negate=True))

    # OR helpers
    def or_where_eq(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, "=", value))

    def or_where_ne(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, "<>", value))

    def or_where_gt(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, ">", value))

    def or_where_ge(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, ">=", value))

    def or_where_lt(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, "<", value))

    def or_where_le(self, column: "ColumnLike", value: Any) -> Self:
        return self._where(Combinator.OR, p.comparison(column, "<=", value))

    def or_where_like(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.OR, p.like(column, mask))

    def or_where_not_like(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.OR, p.like(column, mask, negate=True))

    def or_where_like_left(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.OR, p.like(column, mask, suffix="%"))

    def or_where_like_right(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.OR, p.like(column, mask, prefix="%"))

    def or_where_like_any(self, column: "ColumnLike", mask: str) -> Self:
        return self._where(Combinator.OR, p.like(column, mask, prefix="%", suffix="%"))

    def or_where_is_null(self, column: "ColumnLike") -> Self:
        return self._where(Combinator.OR, p.is_null(column))

    def or_where_is_not_null(self, column: "ColumnLike") -> Self:
        return self._where(Combinator.OR, p.is_not_null(column))

    def or_where_in(self, column: "ColumnLike", values: Iterable[Any]) -> Self:
        return self._where(Combinator.OR, p.in_list(column, values))

    def or_where_not_in(self, column: "ColumnLike", values: Iterable[Any]) -> Self:
        return self._where(Combinator.OR, p.in_list(column, values, negate=True))

    def or_where_in_query(self, column: "ColumnLike", query: "Union[StatementBase, str]") -> Self:
        return self._where(Combinator.OR, p.in_query(column, query))

    def or_where_not_in_query(self, column: "ColumnLike", query: "Union[StatementBase, str]") -> Self:
        return self._where(Combinator.OR, p.in_query(column, query, negate=True))

    def or_where_between(self, column: "ColumnLike", low: Any, high: Any) -> Self:
        return self._where(Combinator.OR, p.between(column, low, high))

    def or_where_not_between(self, column: "ColumnLike", low: Any, high: Any) -> Self:
        return self._where(Combinator.OR, p.between(column, low, high, negate=True))


@trait
class GroupByClauseMixin:
    """Mixin providing GROUP BY for SELECT statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def group_by(self, expr: Any) -> Self:
        self._require_kind("GROUP BY", StatementKind.SELECT)
        self._state.group_by.append(p.predicate_text(expr))
        return self


@trait
class HavingClauseMixin:
    """Mixin providing HAVING for SELECT statements, combined like WHERE."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def having(self, predicate: Any) -> Self:
        self._require_kind("HAVING", StatementKind.SELECT)
        _append(self._state.having, Combinator.AND, p.predicate_text(predicate))
        return self

    def or_having(self, predicate: Any) -> Self:
        self._require_kind("HAVING", StatementKind.SELECT)
        _append(self._state.having, Combinator.OR, p.predicate_text(predicate))
        return self
