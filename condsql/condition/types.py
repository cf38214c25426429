"""
Type definitions for the condition module.

A ``Condition`` is one node of a predicate tree: either a leaf comparison
(field, operator, value) or a group of child conditions joined by a
``Relation``.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Tuple, Union
from uuid import UUID


Bindable = Union[str, int, float, bool, Decimal, date, datetime, time, UUID, bytes, None]


class ConditionError(ValueError):
    """Base class for condition rendering errors."""


class InvalidConditionError(ConditionError):
    """Raised when a condition node is malformed."""

    def __init__(self, message: str, condition: Optional["Condition"] = None):
        super().__init__(message)
        self.condition = condition


class InvalidOperatorError(ConditionError):
    """Raised for an operator outside of ``Operator``."""


class InvalidRelationError(ConditionError):
    """Raised for a relation outside of ``Relation``."""


class Operator(str, Enum):
    """Comparison operators, valued by their SQL text."""

    EQUAL = "="
    NOT_EQUAL = "<>"
    MORE = ">"
    LESS = "<"
    MORE_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    BETWEEN = "BETWEEN"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    # Marks a group node; never rendered.
    GROUP = "GROUP"

    @property
    def sql(self) -> str:
        if self is Operator.GROUP:
            raise InvalidOperatorError("GROUP has no SQL representation")
        return self.value


NULLARY_OPERATORS = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})

UNARY_OPERATORS = frozenset({
    Operator.EQUAL,
    Operator.NOT_EQUAL,
    Operator.MORE,
    Operator.LESS,
    Operator.MORE_OR_EQUAL,
    Operator.LESS_OR_EQUAL,
    Operator.LIKE,
    Operator.NOT_LIKE,
})


class Relation(str, Enum):
    """Logical operators joining sibling conditions."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, value: Union["Relation", str]) -> "Relation":
        """Accept a member or a case-insensitive keyword such as ``"or"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidRelationError(f"Unsupported relation: {value!r}")


class ParamStyle(str, Enum):
    """Placeholder styles understood by common drivers."""

    QMARK = "qmark"  # ?
    NUMERIC = "numeric"  # $1, $2 (asyncpg)
    FORMAT = "format"  # %s (psycopg, pymysql)


@dataclass(frozen=True)
class Condition:
    """One node of a predicate tree."""

    field: str = ""
    operator: Operator = Operator.GROUP
    value: Any = None
    children: Tuple["Condition", ...] = ()
    relation: Relation = Relation.AND

    @property
    def is_group(self) -> bool:
        return self.operator == Operator.GROUP

    @property
    def is_leaf(self) -> bool:
        return not self.is_group

    def and_(self, *others: "Condition") -> "Condition":
        """Combine with other conditions using AND."""
        return Condition(children=(self, *others), relation=Relation.AND)

    def or_(self, *others: "Condition") -> "Condition":
        """Combine with other conditions using OR."""
        return Condition(children=(self, *others), relation=Relation.OR)


class Fragment(NamedTuple):
    """A rendered SQL template and the parameters bound to its placeholders."""

    template: str
    params: List[Any]

    def __bool__(self) -> bool:
        return bool(self.template)
