from condsql.condition.combinator import combine
from condsql.condition.expressions import (
    and_,
    between,
    equal,
    format_time_value,
    group,
    in_,
    is_not_null,
    is_null,
    less,
    less_or_equal,
    like,
    more,
    more_or_equal,
    not_equal,
    not_like,
    or_,
)
from condsql.condition.types import (
    Bindable,
    Condition,
    ConditionError,
    Fragment,
    InvalidConditionError,
    InvalidOperatorError,
    InvalidRelationError,
    Operator,
    ParamStyle,
    Relation,
)

__all__ = [
    "combine",
    "and_",
    "between",
    "equal",
    "format_time_value",
    "group",
    "in_",
    "is_not_null",
    "is_null",
    "less",
    "less_or_equal",
    "like",
    "more",
    "more_or_equal",
    "not_equal",
    "not_like",
    "or_",
    "Bindable",
    "Condition",
    "ConditionError",
    "Fragment",
    "InvalidConditionError",
    "InvalidOperatorError",
    "InvalidRelationError",
    "Operator",
    "ParamStyle",
    "Relation",
]
