from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.builder._predicates import predicate_text
from sqlassemble.core.statement import OrderItem, StatementKind
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.core.statement import StatementState

__all__ = ("LimitOffsetClauseMixin", "OrderByClauseMixin")

_ORDER_LIMIT_KINDS = (StatementKind.SELECT, StatementKind.UPDATE, StatementKind.DELETE)


def _row_count(value: Any, clause: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{clause} must be an integer, got {type(value).__name__}"
        raise ModelError(msg)
    if value < 0:
        msg = f"{clause} must not be negative, got {value}"
        raise ModelError(msg)
    return value


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY for SELECT, UPDATE and DELETE statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def order_by(self, expr: Any, desc: bool = False) -> Self:
        """Append an ORDER BY item.

        Args:
            expr: Column or expression to order by.
            desc: Sort descending when True.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("ORDER BY", *_ORDER_LIMIT_KINDS)
        self._state.order_by.append(OrderItem(expression=predicate_text(expr), desc=bool(desc)))
        return self

    def order_asc(self, expr: Any) -> Self:
        return self.order_by(expr, desc=False)

    def order_desc(self, expr: Any) -> Self:
        return self.order_by(expr, desc=True)


@trait
class LimitOffsetClauseMixin:
    """Mixin providing LIMIT (SELECT, UPDATE, DELETE) and OFFSET (SELECT)."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def limit(self, value: int) -> Self:
        """Set the LIMIT clause.

        Raises:
            ModelError: If ``value`` is negative or not an integer.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("LIMIT", *_ORDER_LIMIT_KINDS)
        self._state.limit = _row_count(value, "LIMIT")
        return self

    def offset(self, value: int) -> Self:
        """Set the OFFSET clause.

        Raises:
            ModelError: If ``value`` is negative or not an integer.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_kind("OFFSET", StatementKind.SELECT)
        self._state.offset = _row_count(value, "OFFSET")
        return self
