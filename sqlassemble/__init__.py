"""sqlassemble: fluent SQL statement assembly with literal quoting and text binding."""

from sqlassemble import builder, core, exceptions, utils
from sqlassemble.__metadata__ import __version__
from sqlassemble.builder import (
    Statement,
    Where,
    and_,
    delete_from,
    insert_into,
    not_,
    or_,
    select_from,
    subquery,
    update_table,
)
from sqlassemble.core import (
    JoinKind,
    QuoteStyle,
    Raw,
    SqlName,
    StatementKind,
    back_quote,
    bind,
    bind_named,
    bind_numbered,
    bind_positional,
    bracket_quote,
    double_quote,
    escape,
    name,
    quote,
    raw,
)
from sqlassemble.exceptions import (
    BindError,
    ExtraParameterError,
    MissingParameterError,
    ModelError,
    RenderError,
    SQLAssembleError,
    UnsupportedValueError,
)

__all__ = (
    "BindError",
    "ExtraParameterError",
    "JoinKind",
    "MissingParameterError",
    "ModelError",
    "QuoteStyle",
    "Raw",
    "RenderError",
    "SQLAssembleError",
    "SqlName",
    "Statement",
    "StatementKind",
    "UnsupportedValueError",
    "Where",
    "__version__",
    "and_",
    "back_quote",
    "bind",
    "bind_named",
    "bind_numbered",
    "bind_positional",
    "bracket_quote",
    "builder",
    "core",
    "delete_from",
    "double_quote",
    "escape",
    "exceptions",
    "insert_into",
    "name",
    "not_",
    "or_",
    "quote",
    "raw",
    "select_from",
    "subquery",
    "update_table",
    "utils",
)
