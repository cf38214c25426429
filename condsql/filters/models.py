"""
Models for the JSON filter format.

A filter document is a tree of logical nodes (``and``/``or``) whose leaves
are comparisons:

    {
        "type": "logical",
        "operator": "and",
        "conditions": [
            {"type": "comparison", "field": "age", "operator": "between", "value": [18, 65]},
            {"type": "logical", "operator": "or", "conditions": [...]}
        ]
    }
"""
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class ComparisonOperator(str, Enum):
    """Supported comparison operators for filters."""
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    NOT_LIKE = "not_like"
    IN = "in"
    BETWEEN = "between"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"


class LogicalOperator(str, Enum):
    """Supported logical operators for combining conditions."""
    AND = "and"
    OR = "or"


SCALAR_OPERATORS = frozenset({
    ComparisonOperator.EQ,
    ComparisonOperator.NEQ,
    ComparisonOperator.GT,
    ComparisonOperator.GTE,
    ComparisonOperator.LT,
    ComparisonOperator.LTE,
    ComparisonOperator.LIKE,
    ComparisonOperator.NOT_LIKE,
})


class ComparisonCondition(BaseModel):
    """A comparison condition for filtering."""
    type: Literal["comparison"] = "comparison"
    field: str = Field(..., description="Field name to compare against")
    operator: ComparisonOperator = Field(..., description="Comparison operator")
    value: Optional[Any] = Field(None, description="Value to compare with")

    @model_validator(mode="after")
    def check_value_shape(self) -> "ComparisonCondition":
        if self.operator in SCALAR_OPERATORS and self.value is None:
            raise ValueError(
                f"'{self.operator.value}' requires a value; use 'is_null' to match NULL"
            )
        if self.operator == ComparisonOperator.IN and not isinstance(self.value, list):
            raise ValueError("'in' requires a list value")
        if self.operator == ComparisonOperator.BETWEEN:
            if not isinstance(self.value, list) or len(self.value) != 2:
                raise ValueError("'between' requires a list of exactly two values")
        return self


class LogicalCondition(BaseModel):
    """A logical condition for combining multiple conditions."""
    type: Literal["logical"] = "logical"
    operator: LogicalOperator = Field(..., description="Logical operator")
    conditions: List[Union[ComparisonCondition, "LogicalCondition"]] = Field(
        default_factory=list, description="List of conditions to combine"
    )


class WhereClause(LogicalCondition):
    """Root of a filter document."""


LogicalCondition.model_rebuild()
WhereClause.model_rebuild()
