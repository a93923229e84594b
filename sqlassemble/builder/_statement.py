"""The fluent statement builder.

Example:
    >>> Statement.select_from("company").field("id").field("name").and_where("salary > 25000").sql()
    'SELECT id, name FROM company WHERE salary > 25000;'
"""

from typing import Any, Optional

from mypy_extensions import mypyc_attr

from sqlassemble.builder._base import StatementBase
from sqlassemble.builder.mixins import (
    GroupByClauseMixin,
    HavingClauseMixin,
    InsertValuesMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    SelectColumnsMixin,
    SetOperationMixin,
    UpdateSetClauseMixin,
    WhereClauseMixin,
)
from sqlassemble.core.statement import StatementKind

__all__ = ("Statement",)


@mypyc_attr(allow_interpreted_subclasses=True)
class Statement(
    StatementBase,
    SelectColumnsMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    InsertValuesMixin,
    UpdateSetClauseMixin,
    SetOperationMixin,
):
    """One SELECT, INSERT, UPDATE or DELETE statement under construction.

    Create instances with :meth:`select_from`, :meth:`insert_into`,
    :meth:`update_table` or :meth:`delete_from`. Clause methods that do not
    apply to the statement kind raise :class:`~sqlassemble.exceptions.ModelError`.
    """

    __slots__ = ()

    @classmethod
    def select_from(cls, table: Any, alias: Optional[str] = None) -> "Statement":
        """Create a SELECT statement.

        Args:
            table: Table expression; comma separated lists and subqueries are allowed.
            alias: Optional alias rendered as ``table AS alias``.

        Returns:
            Statement: A new SELECT statement.
        """
        return cls(StatementKind.SELECT, table, alias)

    @classmethod
    def insert_into(cls, table: Any) -> "Statement":
        return cls(StatementKind.INSERT, table)

    @classmethod
    def update_table(cls, table: Any) -> "Statement":
        return cls(StatementKind.UPDATE, table)

    @classmethod
    def delete_from(cls, table: Any) -> "Statement":
        return cls(StatementKind.DELETE, table)
