from condsql.filters.models import (
    ComparisonCondition,
    ComparisonOperator,
    LogicalCondition,
    LogicalOperator,
    WhereClause,
)
from condsql.filters.parser import FilterParser, parse_where_clause

__all__ = [
    "ComparisonCondition",
    "ComparisonOperator",
    "LogicalCondition",
    "LogicalOperator",
    "WhereClause",
    "FilterParser",
    "parse_where_clause",
]
