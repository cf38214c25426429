"""
Flattening of condition trees into parameterized SQL fragments.

``combine`` walks a sequence of conditions left to right and produces one
template string plus one parameter list. Placeholders are emitted through a
single ``_ParamSink`` shared by the whole walk, so the N-th placeholder in the
text always binds the N-th parameter, however deeply groups are nested.
"""

from collections.abc import Iterable
from typing import Any, List, Union

from condsql.logging_config import get_logger, log_performance

from .types import (
    NULLARY_OPERATORS,
    UNARY_OPERATORS,
    Condition,
    Fragment,
    InvalidConditionError,
    InvalidOperatorError,
    Operator,
    ParamStyle,
    Relation,
)

logger = get_logger(__name__)

# Rendered in place of ``field IN ()``, which most dialects reject.
EMPTY_IN_SQL = "1 = 0"


class _ParamSink:
    """
    Collects params and returns the placeholder for each one.
      - 'qmark'   -> ?
      - 'numeric' -> $1, $2, ... counted from start_index
      - 'format'  -> %s
    """

    def __init__(self, paramstyle: ParamStyle = ParamStyle.QMARK, start_index: int = 1):
        self.paramstyle = ParamStyle(paramstyle)
        if start_index < 1:
            raise ValueError("start_index must be at least 1")
        self.next_idx = start_index
        self.params: List[Any] = []

    def add(self, value: Any) -> str:
        self.params.append(value)
        if self.paramstyle is ParamStyle.NUMERIC:
            placeholder = f"${self.next_idx}"
            self.next_idx += 1
            return placeholder
        if self.paramstyle is ParamStyle.FORMAT:
            return "%s"
        return "?"


def _resolve_operator(condition: Condition) -> Operator:
    try:
        return Operator(condition.operator)
    except ValueError:
        raise InvalidOperatorError(f"Unsupported operator: {condition.operator!r}") from None


def _render_leaf(condition: Condition, operator: Operator, sink: _ParamSink) -> str:
    if condition.children:
        raise InvalidConditionError(
            f"Leaf condition on {condition.field!r} must not have children", condition
        )

    field = condition.field
    value = condition.value

    if operator in NULLARY_OPERATORS:
        return f"{field} {operator.sql}"

    if operator in UNARY_OPERATORS:
        return f"{field} {operator.sql} {sink.add(value)}"

    if operator is Operator.IN:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise InvalidConditionError(
                f"IN on {field!r} needs a collection of values, got {type(value).__name__}", condition
            )
        values = list(value)
        if not values:
            logger.debug("Empty IN on %r rendered as constant false", field)
            return EMPTY_IN_SQL
        placeholders = ", ".join(sink.add(v) for v in values)
        return f"{field} IN ({placeholders})"

    if operator is Operator.BETWEEN:
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise InvalidConditionError(
                f"BETWEEN on {field!r} needs exactly two values, got {value!r}", condition
            )
        lo, hi = value
        return f"{field} BETWEEN {sink.add(lo)} AND {sink.add(hi)}"

    raise InvalidOperatorError(f"Unsupported operator: {operator!r}")


def _render_group(condition: Condition, sink: _ParamSink) -> str:
    if condition.field or condition.value is not None:
        raise InvalidConditionError("Group condition must not have a field or value", condition)

    inner = _render(condition.children, Relation.parse(condition.relation), sink)
    # Empty groups contribute nothing rather than a dangling "()".
    return f"({inner})" if inner else ""


def _render(conditions: Iterable, relation: Relation, sink: _ParamSink) -> str:
    parts: List[str] = []
    for condition in conditions:
        if not isinstance(condition, Condition):
            raise InvalidConditionError(f"Expected a Condition, got {type(condition).__name__}")

        operator = _resolve_operator(condition)
        if operator is Operator.GROUP:
            part = _render_group(condition, sink)
        else:
            part = _render_leaf(condition, operator, sink)

        if part:
            parts.append(part)

    return f" {relation.value} ".join(parts)


@log_performance(logger, "combine conditions")
def combine(
    conditions: Iterable[Condition],
    relation: Union[Relation, str] = Relation.AND,
    *,
    paramstyle: Union[ParamStyle, str] = ParamStyle.QMARK,
    start_index: int = 1,
) -> Fragment:
    """
    Flatten conditions into a SQL fragment and its ordered parameters.

    Args:
        conditions: Conditions to join, in order
        relation: Relation placed between top-level conditions
        paramstyle: Placeholder style; ``?`` by default
        start_index: First number used by the numeric style, for fragments
            appended to a query that already binds parameters

    Returns:
        Fragment: ``(template, params)``; ``("", [])`` for no conditions

    Raises:
        InvalidConditionError: A node is malformed (wrong BETWEEN arity,
            non-collection IN value, leaf with children, group with a value)
        InvalidOperatorError: A node carries an unknown operator
        InvalidRelationError: An unknown relation was given

    Example:
        >>> combine([equal("id", 1), is_null("deleted_at")])
        Fragment(template='id = ? AND deleted_at IS NULL', params=[1])
    """
    sink = _ParamSink(paramstyle, start_index)
    template = _render(conditions, Relation.parse(relation), sink)

    logger.debug("Combined conditions into %r with %d params", template, len(sink.params))
    return Fragment(template, sink.params)
