"""Fluent SQL statement builder.

This module provides the statement constructors, the compound predicate
helpers and text composition for subqueries.
"""

from typing import Any, Optional

from sqlassemble.builder._base import StatementBase
from sqlassemble.builder._predicates import and_, not_, or_, subquery
from sqlassemble.builder._statement import Statement
from sqlassemble.builder._where import Where
from sqlassemble.core.statement import JoinKind, StatementKind
from sqlassemble.exceptions import ModelError

__all__ = (
    "JoinKind",
    "ModelError",
    "Statement",
    "StatementBase",
    "StatementKind",
    "Where",
    "and_",
    "delete_from",
    "insert_into",
    "not_",
    "or_",
    "select_from",
    "subquery",
    "update_table",
)


def select_from(table: Any, alias: Optional[str] = None) -> Statement:
    """Create a SELECT statement.

    Args:
        table: Table expression to select from.
        alias: Optional alias for the table.

    Returns:
        Statement: A new SELECT statement.
    """
    return Statement.select_from(table, alias)


def insert_into(table: Any) -> Statement:
    """Create an INSERT statement.

    Returns:
        Statement: A new INSERT statement.
    """
    return Statement.insert_into(table)


def update_table(table: Any) -> Statement:
    """Create an UPDATE statement.

    Returns:
        Statement: A new UPDATE statement.
    """
    return Statement.update_table(table)


def delete_from(table: Any) -> Statement:
    """Create a DELETE statement.

    Returns:
        Statement: A new DELETE statement.
    """
    return Statement.delete_from(table)
