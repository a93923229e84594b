from typing import TYPE_CHECKING, Any, Optional, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.builder._predicates import predicate_text
from sqlassemble.core.names import SqlName
from sqlassemble.core.statement import JoinClause, JoinKind, StatementKind
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.core.statement import StatementState

__all__ = ("JoinClauseMixin",)


def _join_kind(kind: Union[JoinKind, str]) -> JoinKind:
    try:
        return JoinKind(str(kind).strip().upper())
    except ValueError as exc:
        msg = f"Unsupported join type: {kind}"
        raise ModelError(msg) from exc


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clauses for SELECT statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def join(self, kind: Union[JoinKind, str], table: Any, on: Optional[Any] = None) -> Self:
        """Add a JOIN clause.

        An empty ``table`` is accepted here and reported when the statement is
        rendered.

        Args:
            kind: INNER, LEFT, RIGHT or CROSS, as :class:`JoinKind` or string.
            table: Table expression, optionally with an alias.
            on: Join condition, rendered after ``ON``.

        Raises:
            ModelError: If the statement is not a SELECT or the join type is unknown.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("JOIN", StatementKind.SELECT)
        join_kind = _join_kind(kind)
        table_text = table.safe() if isinstance(table, SqlName) else str(table)
        condition = predicate_text(on) if on is not None else None
        self._state.joins.append(JoinClause(kind=join_kind, table=table_text, on=condition))
        return self

    def inner_join(self, table: Any, on: Any) -> Self:
        return self.join(JoinKind.INNER, table, on)

    def left_join(self, table: Any, on: Any) -> Self:
        return self.join(JoinKind.LEFT, table, on)

    def right_join(self, table: Any, on: Any) -> Self:
        return self.join(JoinKind.RIGHT, table, on)

    def cross_join(self, table: Any) -> Self:
        return self.join(JoinKind.CROSS, table)
