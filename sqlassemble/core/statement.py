"""In-memory representation of one SQL statement under construction."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

__all__ = (
    "Assignment",
    "Combinator",
    "JoinClause",
    "JoinKind",
    "OrderItem",
    "Predicate",
    "SetOperation",
    "SetOperationKind",
    "StatementKind",
    "StatementState",
)


class StatementKind(str, Enum):
    """SQL command type, fixed when a statement is created."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class JoinKind(str, Enum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CROSS = "CROSS"

    def __str__(self) -> str:
        return self.value


class Combinator(str, Enum):
    """Keyword linking a predicate to the one before it."""

    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


class SetOperationKind(str, Enum):
    UNION = "UNION"
    UNION_ALL = "UNION ALL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Predicate:
    """A WHERE or HAVING fragment; the first entry of a clause has no combinator."""

    text: str
    combinator: Optional[Combinator] = None


@dataclass(frozen=True)
class JoinClause:
    kind: JoinKind
    table: str
    on: Optional[str] = None


@dataclass(frozen=True)
class OrderItem:
    expression: str
    desc: bool = False


@dataclass(frozen=True)
class Assignment:
    column: str
    expression: str


@dataclass(frozen=True)
class SetOperation:
    """A statement appended with UNION or UNION ALL.

    ``query`` is either another statement's state, rendered when the owning
    statement is rendered, or already rendered SELECT text.
    """

    kind: SetOperationKind
    query: "Union[StatementState, str]"


@dataclass
class StatementState:
    """Clause fragments of one statement, in output order."""

    kind: StatementKind
    table: str
    fields: list[str] = field(default_factory=list)
    joins: list[JoinClause] = field(default_factory=list)
    distinct: bool = False
    wheres: list[Predicate] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    having: list[Predicate] = field(default_factory=list)
    order_by: list[OrderItem] = field(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None
    values_rows: list[list[str]] = field(default_factory=list)
    insert_query: "Union[StatementState, str, None]" = None
    set_assignments: list[Assignment] = field(default_factory=list)
    unions: list[SetOperation] = field(default_factory=list)
