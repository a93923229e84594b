from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.builder._predicates import predicate_text
from sqlassemble.core.names import SqlName
from sqlassemble.core.parameters import render_expression
from sqlassemble.core.quoting import quote
from sqlassemble.core.statement import Assignment, StatementKind
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.core.statement import StatementState

__all__ = ("UpdateSetClauseMixin",)


@trait
class UpdateSetClauseMixin:
    """Mixin providing the SET clause for UPDATE statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def _assign(self, column: Any, expression: str) -> Self:
        self._require_kind("SET clause", StatementKind.UPDATE)
        column_text = predicate_text(column.safe() if isinstance(column, SqlName) else column)
        assignments = self._state.set_assignments
        for index, assignment in enumerate(assignments):
            if assignment.column == column_text:
                assignments[index] = Assignment(column=column_text, expression=expression)
                return self
        assignments.append(Assignment(column=column_text, expression=expression))
        return self

    def set(self, column: Any, expr: Any) -> Self:
        """Assign ``expr`` to ``column``.

        String expressions are emitted as given (``set("price", "price + 10")``);
        other values render as SQL literals. Setting a column again replaces
        the earlier assignment in place.

        Raises:
            ModelError: If the statement is not an UPDATE.

        Returns:
            The current builder instance for method chaining.
        """
        try:
            expression = render_expression(expr)
        except (TypeError, ValueError) as exc:
            msg = f"Cannot assign {expr!r} to {column}: {exc}"
            raise ModelError(msg) from exc
        return self._assign(column, expression)

    def set_str(self, column: Any, value: str) -> Self:
        """Assign ``value`` to ``column`` as a quoted string literal."""
        return self._assign(column, quote(str(value)))
