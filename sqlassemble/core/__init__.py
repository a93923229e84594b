"""Statement model, rendering, quoting and placeholder binding."""

from sqlassemble.core.binding import (
    PlaceholderInfo,
    PlaceholderStyle,
    bind,
    bind_named,
    bind_numbered,
    bind_positional,
    extract_placeholders,
)
from sqlassemble.core.compiler import render, render_query
from sqlassemble.core.names import SqlName, name
from sqlassemble.core.parameters import Raw, SQLValue, raw, render_expression, render_literal
from sqlassemble.core.quoting import (
    QuoteStyle,
    back_quote,
    bracket_quote,
    double_quote,
    escape,
    quote,
    quote_with,
    unescape,
    unquote,
)
from sqlassemble.core.statement import (
    Assignment,
    Combinator,
    JoinClause,
    JoinKind,
    OrderItem,
    Predicate,
    SetOperation,
    SetOperationKind,
    StatementKind,
    StatementState,
)

__all__ = (
    "Assignment",
    "Combinator",
    "JoinClause",
    "JoinKind",
    "OrderItem",
    "PlaceholderInfo",
    "PlaceholderStyle",
    "Predicate",
    "QuoteStyle",
    "Raw",
    "SQLValue",
    "SetOperation",
    "SetOperationKind",
    "SqlName",
    "StatementKind",
    "StatementState",
    "back_quote",
    "bind",
    "bind_named",
    "bind_numbered",
    "bind_positional",
    "bracket_quote",
    "double_quote",
    "escape",
    "extract_placeholders",
    "name",
    "quote",
    "quote_with",
    "raw",
    "render",
    "render_expression",
    "render_literal",
    "render_query",
    "unescape",
    "unquote",
)
