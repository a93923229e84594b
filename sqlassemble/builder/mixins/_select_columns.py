from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.core.names import SqlName
from sqlassemble.core.statement import StatementKind
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.core.statement import StatementState

__all__ = ("SelectColumnsMixin",)

_COLUMN_KINDS = (StatementKind.SELECT, StatementKind.INSERT)


def _expression(expr: Any) -> str:
    text = expr.safe() if isinstance(expr, SqlName) else str(expr)
    if not text.strip():
        msg = "Field expression must not be empty."
        raise ModelError(msg)
    return text


def _expressions(exprs: "Sequence[Any]") -> list[str]:
    if isinstance(exprs, (str, bytes)) or not isinstance(exprs, Sequence):
        msg = "Expected a sequence of field expressions."
        raise ModelError(msg)
    return [_expression(e) for e in exprs]


@trait
class SelectColumnsMixin:
    """Mixin providing the field list of SELECT and INSERT statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def field(self, expr: Any) -> Self:
        """Append one field expression.

        Args:
            expr: Raw SQL expression text or a :class:`SqlName`. Literals inside
                the expression must already be quoted.

        Raises:
            ModelError: If the statement is not a SELECT or INSERT, or ``expr`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("fields", *_COLUMN_KINDS)
        self._state.fields.append(_expression(expr))
        return self

    def fields(self, exprs: "Sequence[Any]") -> Self:
        """Append several field expressions in order."""
        self._require_kind("fields", *_COLUMN_KINDS)
        self._state.fields.extend(_expressions(exprs))
        return self

    def set_fields(self, exprs: "Sequence[Any]") -> Self:
        """Replace the field list."""
        self._require_kind("fields", *_COLUMN_KINDS)
        self._state.fields = _expressions(exprs)
        return self

    def set_field(self, expr: Any) -> Self:
        """Replace the field list with a single expression."""
        self._require_kind("fields", *_COLUMN_KINDS)
        self._state.fields = [_expression(expr)]
        return self

    def distinct(self) -> Self:
        self._require_kind("DISTINCT", StatementKind.SELECT)
        self._state.distinct = True
        return self
