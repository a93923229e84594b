"""SQL statement builder mixins."""

from sqlassemble.builder.mixins._insert_values import InsertValuesMixin
from sqlassemble.builder.mixins._join import JoinClauseMixin
from sqlassemble.builder.mixins._order_limit import LimitOffsetClauseMixin, OrderByClauseMixin
from sqlassemble.builder.mixins._select_columns import SelectColumnsMixin
from sqlassemble.builder.mixins._set_ops import SetOperationMixin
from sqlassemble.builder.mixins._update_set import UpdateSetClauseMixin
from sqlassemble.builder.mixins._where import GroupByClauseMixin, HavingClauseMixin, WhereClauseMixin

__all__ = (
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "InsertValuesMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "SelectColumnsMixin",
    "SetOperationMixin",
    "UpdateSetClauseMixin",
    "WhereClauseMixin",
)
