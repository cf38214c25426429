from condsql.condition import (
    Condition,
    Fragment,
    Operator,
    ParamStyle,
    Relation,
    ConditionError,
    InvalidConditionError,
    InvalidOperatorError,
    InvalidRelationError,
    combine,
    equal,
    not_equal,
    more,
    less,
    more_or_equal,
    less_or_equal,
    like,
    not_like,
    is_null,
    is_not_null,
    between,
    in_,
    group,
    and_,
    or_,
    format_time_value,
)
from condsql.filters import FilterParser, WhereClause, parse_where_clause

__version__ = "0.1.0"

__all__ = [
    "Condition",
    "Fragment",
    "Operator",
    "ParamStyle",
    "Relation",
    "ConditionError",
    "InvalidConditionError",
    "InvalidOperatorError",
    "InvalidRelationError",
    "combine",
    "equal",
    "not_equal",
    "more",
    "less",
    "more_or_equal",
    "less_or_equal",
    "like",
    "not_like",
    "is_null",
    "is_not_null",
    "between",
    "in_",
    "group",
    "and_",
    "or_",
    "format_time_value",
    "FilterParser",
    "WhereClause",
    "parse_where_clause",
]
