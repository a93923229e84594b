"""Base class for SQL statement builders.

A builder owns one :class:`~sqlassemble.core.statement.StatementState` and
mutates it in place; every clause method returns the builder for chaining.
"""

import copy
from typing import Any, Optional

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from sqlassemble.core.compiler import render, render_query
from sqlassemble.core.names import SqlName
from sqlassemble.core.statement import StatementKind, StatementState
from sqlassemble.exceptions import ModelError
from sqlassemble.utils.logging import get_logger

__all__ = ("StatementBase",)

logger = get_logger("builder")


def _table_text(table: Any, alias: Optional[str] = None) -> str:
    text = table.safe() if isinstance(table, SqlName) else str(table)
    if alias:
        return f"{text} AS {alias}"
    return text


@mypyc_attr(allow_interpreted_subclasses=True)
class StatementBase:
    """Shared state handling, kind checks and rendering."""

    __slots__ = ("_state",)

    def __init__(self, kind: StatementKind, table: Any, alias: Optional[str] = None) -> None:
        self._state = StatementState(kind=StatementKind(kind), table=_table_text(table, alias))

    @property
    def kind(self) -> StatementKind:
        """The statement type, fixed at construction."""
        return self._state.kind

    @property
    def table(self) -> str:
        return self._state.table

    @property
    def state(self) -> StatementState:
        """The clause fragments collected so far. Treat as read-only."""
        return self._state

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None:
        """Reject a clause the current statement kind cannot carry.

        Raises:
            ModelError: If the statement kind is not one of ``kinds``.
        """
        if self._state.kind not in kinds:
            allowed = "/".join(str(k) for k in kinds)
            msg = f"Cannot add {clause} to a {self._state.kind} statement; only {allowed} supports it."
            raise ModelError(msg)

    def copy(self) -> Self:
        """Return an independent copy of this builder."""
        duplicate = object.__new__(type(self))
        duplicate._state = copy.deepcopy(self._state)
        return duplicate

    def query(self) -> str:
        """Render the statement without the terminating ``;``.

        Raises:
            RenderError: If a required part is missing.

        Returns:
            str: The SQL text.
        """
        return render_query(self._state)

    def sql(self) -> str:
        """Render the complete statement.

        Raises:
            RenderError: If a required part is missing.

        Returns:
            str: The SQL text ending in ``;``.
        """
        return render(self._state)

    def subquery(self) -> str:
        """Render as ``(query)`` for use as a field or table expression."""
        return f"({self.query()})"

    def subquery_as(self, alias: str) -> str:
        """Render as ``(query) AS alias``."""
        return f"({self.query()}) AS {alias}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._state.kind.value!r}, table={self._state.table!r})"
