from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.core.parameters import render_expression
from sqlassemble.core.statement import StatementKind
from sqlassemble.exceptions import ModelError
from sqlassemble.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlassemble.builder._base import StatementBase
    from sqlassemble.core.statement import StatementState

__all__ = ("InsertValuesMixin",)

logger = get_logger("builder")


def _row_value(value: Any) -> str:
    try:
        return render_expression(value)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot use {value!r} as an INSERT value: {exc}"
        raise ModelError(msg) from exc


@trait
class InsertValuesMixin:
    """Mixin providing VALUES rows and INSERT ... SELECT for INSERT statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def values(self, row: "Sequence[Any]") -> Self:
        """Append a row of values.

        String items are emitted as given, so text literals must be quoted by
        the caller (see :func:`~sqlassemble.core.quoting.quote`). Numbers,
        booleans, ``None`` and :class:`Raw` items render as SQL literals.

        Args:
            row: Values in field order.

        Raises:
            ModelError: If the statement is not an INSERT, or the row length
                differs from the field count or from the first row.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("VALUES", StatementKind.INSERT)
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            msg = "A VALUES row must be a sequence of values."
            raise ModelError(msg)
        if not row:
            msg = "A VALUES row must not be empty."
            raise ModelError(msg)

        state = self._state
        if state.fields:
            expected = len(state.fields)
        elif state.values_rows and state.insert_query is None:
            expected = len(state.values_rows[0])
        else:
            expected = len(row)
        if len(row) != expected:
            msg = f"Row arity mismatch: got {len(row)} values, expected {expected}"
            raise ModelError(msg)

        rendered = [_row_value(v) for v in row]
        if state.insert_query is not None:
            logger.debug("Replacing INSERT ... SELECT source of %s with VALUES rows", state.table)
            state.insert_query = None
            state.values_rows = []
        state.values_rows.append(rendered)
        return self

    def from_select(self, query: "Union[StatementBase, str]") -> Self:
        """Use a SELECT statement as the row source (``INSERT INTO t (...) SELECT ...``).

        Replaces any VALUES rows added before.

        Raises:
            ModelError: If the statement is not an INSERT or ``query`` is not a SELECT.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("SELECT source", StatementKind.INSERT)
        if isinstance(query, str):
            if not query.strip().rstrip(";").strip():
                msg = "INSERT source query must not be empty."
                raise ModelError(msg)
            source: Any = query
        else:
            if query.kind is not StatementKind.SELECT:
                msg = f"INSERT source must be a SELECT statement, got {query.kind}"
                raise ModelError(msg)
            source = query.state
        if self._state.values_rows:
            logger.debug("Replacing VALUES rows of %s with an INSERT ... SELECT source", self._state.table)
        self._state.values_rows = []
        self._state.insert_query = source
        return self
