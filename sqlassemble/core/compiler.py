"""Rendering of statement state into SQL text.

Rendering is a pure function of :class:`~sqlassemble.core.statement.StatementState`.
Clauses whose fragments are empty are omitted entirely, and a rendered
statement always ends in exactly one ``;``. Required parts are checked
before any text is produced, so a failed render never yields partial SQL.
"""

from typing import TYPE_CHECKING, Callable

from sqlassemble.core.statement import StatementKind
from sqlassemble.exceptions import RenderError
from sqlassemble.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlassemble.core.statement import Predicate, StatementState

__all__ = ("render", "render_predicates", "render_query", "strip_terminator")

logger = get_logger("core.compiler")

TERMINATOR = ";"


def strip_terminator(sql: str) -> str:
    """Drop trailing whitespace and ``;`` from rendered text."""
    return sql.rstrip().rstrip(TERMINATOR).rstrip()


def render_predicates(predicates: "Sequence[Predicate]") -> str:
    """Join predicate fragments with their combinators.

    A single fragment is emitted bare. With two or more fragments every one is
    wrapped in parentheses, whatever its contents.
    """
    if not predicates:
        return ""
    if len(predicates) == 1:
        return predicates[0].text
    parts: list[str] = []
    for index, predicate in enumerate(predicates):
        if index:
            parts.append(str(predicate.combinator or "AND"))
        parts.append(f"({predicate.text})")
    return " ".join(parts)


def _require_table(state: "StatementState") -> None:
    if not state.table or not state.table.strip():
        msg = "No table name"
        raise RenderError(msg)


def _where_clause(state: "StatementState") -> str:
    if not state.wheres:
        return ""
    return f" WHERE {render_predicates(state.wheres)}"


def _order_by_clause(state: "StatementState") -> str:
    if not state.order_by:
        return ""
    items = ", ".join(f"{item.expression} DESC" if item.desc else item.expression for item in state.order_by)
    return f" ORDER BY {items}"


def _limit_clause(state: "StatementState") -> str:
    return "" if state.limit is None else f" LIMIT {state.limit}"


def _render_nested_select(query: "StatementState | str") -> str:
    if isinstance(query, str):
        return strip_terminator(query)
    if query.kind is not StatementKind.SELECT:
        msg = f"Expected a nested SELECT statement, got {query.kind}"
        raise RenderError(msg)
    return _render_select(query)


def _render_select(state: "StatementState") -> str:
    _require_table(state)
    if not state.fields:
        msg = "No fields"
        raise RenderError(msg)

    joins = ""
    if state.joins:
        rendered_joins: list[str] = []
        for join in state.joins:
            if not join.table or not join.table.strip():
                msg = "Empty join table"
                raise RenderError(msg)
            text = f"{join.kind} JOIN {join.table}"
            if join.on:
                text = f"{text} ON {join.on}"
            rendered_joins.append(text)
        joins = " " + " ".join(rendered_joins)

    distinct = " DISTINCT" if state.distinct else ""
    group_by = f" GROUP BY {', '.join(state.group_by)}" if state.group_by else ""
    having = f" HAVING {render_predicates(state.having)}" if state.having else ""
    offset = "" if state.offset is None else f" OFFSET {state.offset}"
    unions = "".join(f" {op.kind} {_render_nested_select(op.query)}" for op in state.unions)

    return (
        f"SELECT{distinct} {', '.join(state.fields)} FROM {state.table}"
        f"{joins}{_where_clause(state)}{group_by}{having}"
        f"{_order_by_clause(state)}{_limit_clause(state)}{offset}{unions}"
    )


def _render_insert(state: "StatementState") -> str:
    _require_table(state)
    columns = f" ({', '.join(state.fields)})" if state.fields else ""

    if state.insert_query is not None:
        return f"INSERT INTO {state.table}{columns} {_render_nested_select(state.insert_query)}"

    if not state.values_rows:
        msg = "No values"
        raise RenderError(msg)
    arity = len(state.fields) if state.fields else len(state.values_rows[0])
    for number, row in enumerate(state.values_rows, start=1):
        if len(row) != arity:
            msg = f"Row arity mismatch: row {number} has {len(row)} values, expected {arity}"
            raise RenderError(msg)
    rows = ", ".join(f"({', '.join(row)})" for row in state.values_rows)
    return f"INSERT INTO {state.table}{columns} VALUES {rows}"


def _render_update(state: "StatementState") -> str:
    _require_table(state)
    if not state.set_assignments:
        msg = "No set fields"
        raise RenderError(msg)
    sets = ", ".join(f"{a.column} = {a.expression}" for a in state.set_assignments)
    return f"UPDATE {state.table} SET {sets}{_where_clause(state)}{_order_by_clause(state)}{_limit_clause(state)}"


def _render_delete(state: "StatementState") -> str:
    _require_table(state)
    return f"DELETE FROM {state.table}{_where_clause(state)}{_order_by_clause(state)}{_limit_clause(state)}"


_RENDERERS: "dict[StatementKind, Callable[[StatementState], str]]" = {
    StatementKind.SELECT: _render_select,
    StatementKind.INSERT: _render_insert,
    StatementKind.UPDATE: _render_update,
    StatementKind.DELETE: _render_delete,
}


def render_query(state: "StatementState") -> str:
    """Render ``state`` without the terminating ``;``.

    Raises:
        RenderError: If a required part is missing.

    Returns:
        The SQL text.
    """
    return _RENDERERS[state.kind](state)


def render(state: "StatementState") -> str:
    """Render ``state`` as a complete statement ending in ``;``.

    Raises:
        RenderError: If a required part is missing.

    Returns:
        The SQL text.
    """
    sql = render_query(state) + TERMINATOR
    logger.debug("Rendered %s statement for table %s", state.kind, state.table)
    return sql
