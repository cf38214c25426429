"""
Parser for converting JSON filter documents into condition trees.
"""
from typing import Any, Callable, Dict, List, Tuple, Union

from condsql.condition import expressions
from condsql.condition.combinator import combine
from condsql.condition.types import Condition, Fragment, ParamStyle, Relation
from condsql.filters.models import (
    ComparisonCondition,
    ComparisonOperator,
    LogicalCondition,
    LogicalOperator,
    WhereClause,
)
from condsql.logging_config import get_logger

logger = get_logger(__name__)

_SCALAR_BUILDERS: Dict[ComparisonOperator, Callable[[str, Any], Condition]] = {
    ComparisonOperator.EQ: expressions.equal,
    ComparisonOperator.NEQ: expressions.not_equal,
    ComparisonOperator.GT: expressions.more,
    ComparisonOperator.GTE: expressions.more_or_equal,
    ComparisonOperator.LT: expressions.less,
    ComparisonOperator.LTE: expressions.less_or_equal,
    ComparisonOperator.LIKE: expressions.like,
    ComparisonOperator.NOT_LIKE: expressions.not_like,
    ComparisonOperator.IN: expressions.in_,
}

_RELATIONS = {
    LogicalOperator.AND: Relation.AND,
    LogicalOperator.OR: Relation.OR,
}


class FilterParser:
    """Converts JSON filter documents to conditions and SQL fragments."""

    def to_conditions(self, where_clause: LogicalCondition) -> Tuple[List[Condition], Relation]:
        """
        Convert the root of a filter document.

        Returns:
            Tuple of (top-level conditions, relation joining them)
        """
        conditions = [self._parse_condition(c) for c in where_clause.conditions]
        return conditions, _RELATIONS[where_clause.operator]

    def build(
        self,
        where_clause: LogicalCondition,
        paramstyle: Union[ParamStyle, str] = ParamStyle.QMARK,
        start_index: int = 1,
    ) -> Fragment:
        """Convert a filter document straight into a SQL fragment."""
        conditions, relation = self.to_conditions(where_clause)
        return combine(conditions, relation, paramstyle=paramstyle, start_index=start_index)

    def _parse_condition(self, condition: Union[ComparisonCondition, LogicalCondition]) -> Condition:
        if condition.type == "logical":
            return self._parse_logical_condition(condition)
        return self._parse_comparison_condition(condition)

    def _parse_logical_condition(self, condition: LogicalCondition) -> Condition:
        children = [self._parse_condition(c) for c in condition.conditions]
        if not children:
            logger.debug("Empty '%s' block in filter document", condition.operator.value)
        return expressions.group(_RELATIONS[condition.operator], children)

    def _parse_comparison_condition(self, condition: ComparisonCondition) -> Condition:
        field = condition.field
        operator = condition.operator
        value = condition.value

        if operator == ComparisonOperator.IS_NULL:
            return expressions.is_null(field)
        if operator == ComparisonOperator.IS_NOT_NULL:
            return expressions.is_not_null(field)
        if operator == ComparisonOperator.BETWEEN:
            lo, hi = value
            return expressions.between(field, lo, hi)
        return _SCALAR_BUILDERS[operator](field, value)


def parse_where_clause(payload: Union[str, Dict[str, Any]]) -> WhereClause:
    """
    Accept a JSON string or dict and return a validated WhereClause.

    Raises:
        pydantic.ValidationError: The document does not match the filter format
    """
    if isinstance(payload, str):
        return WhereClause.model_validate_json(payload)
    return WhereClause.model_validate(payload)
