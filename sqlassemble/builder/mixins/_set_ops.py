from typing import TYPE_CHECKING, Any, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlassemble.builder._predicates import query_text
from sqlassemble.core.statement import SetOperation, SetOperationKind, StatementKind
from sqlassemble.exceptions import ModelError

if TYPE_CHECKING:
    from sqlassemble.builder._base import StatementBase
    from sqlassemble.core.statement import StatementState

__all__ = ("SetOperationMixin",)


def _reaches(start: "StatementState", target: "StatementState") -> bool:
    """Whether ``target`` is rendered as part of ``start`` through its unions."""
    pending = [start]
    seen: set[int] = set()
    while pending:
        state = pending.pop()
        if state is target:
            return True
        if id(state) in seen:
            continue
        seen.add(id(state))
        pending.extend(op.query for op in state.unions if not isinstance(op.query, str))
    return False


@trait
class SetOperationMixin:
    """Mixin providing UNION and UNION ALL for SELECT statements."""

    __slots__ = ()

    _state: "StatementState"

    def _require_kind(self, clause: str, *kinds: StatementKind) -> None: ...

    def _set_operation(self, kind: SetOperationKind, other: "Union[StatementBase, str]") -> Self:
        self._require_kind(str(kind), StatementKind.SELECT)
        query: Any
        if isinstance(other, str):
            query = query_text(other)
        else:
            if other.kind is not StatementKind.SELECT:
                msg = f"Cannot {kind} a {other.kind} statement."
                raise ModelError(msg)
            if other.state is self._state:
                msg = f"Cannot {kind} a statement with itself."
                raise ModelError(msg)
            if _reaches(other.state, self._state):
                msg = f"Cannot {kind} a statement that already includes this one."
                raise ModelError(msg)
            query = other.state
        self._state.unions.append(SetOperation(kind=kind, query=query))
        return self

    def union(self, other: "Union[StatementBase, str]") -> Self:
        """Append ``UNION other``.

        A statement argument is rendered together with this one, so later
        changes to it are reflected.
        """
        return self._set_operation(SetOperationKind.UNION, other)

    def union_all(self, other: "Union[StatementBase, str]") -> Self:
        return self._set_operation(SetOperationKind.UNION_ALL, other)
