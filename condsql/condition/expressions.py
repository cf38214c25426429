"""
Constructors for condition trees.

Each function returns an immutable ``Condition``. No validation happens
here; malformed nodes are reported when the tree is combined.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, Sequence, Union

from .types import Condition, Operator, Relation


def _leaf(field: str, operator: Operator, value: Any = None) -> Condition:
    return Condition(field=field, operator=operator, value=value)


def equal(field: str, value: Any) -> Condition:
    """Create a ``field = value`` condition."""
    return _leaf(field, Operator.EQUAL, value)


def not_equal(field: str, value: Any) -> Condition:
    """Create a ``field <> value`` condition."""
    return _leaf(field, Operator.NOT_EQUAL, value)


def more(field: str, value: Any) -> Condition:
    """Create a ``field > value`` condition."""
    return _leaf(field, Operator.MORE, value)


def less(field: str, value: Any) -> Condition:
    """Create a ``field < value`` condition."""
    return _leaf(field, Operator.LESS, value)


def more_or_equal(field: str, value: Any) -> Condition:
    """Create a ``field >= value`` condition."""
    return _leaf(field, Operator.MORE_OR_EQUAL, value)


def less_or_equal(field: str, value: Any) -> Condition:
    """Create a ``field <= value`` condition."""
    return _leaf(field, Operator.LESS_OR_EQUAL, value)


def like(field: str, pattern: str) -> Condition:
    """Create a ``field LIKE pattern`` condition."""
    return _leaf(field, Operator.LIKE, pattern)


def not_like(field: str, pattern: str) -> Condition:
    """Create a ``field NOT LIKE pattern`` condition."""
    return _leaf(field, Operator.NOT_LIKE, pattern)


def is_null(field: str) -> Condition:
    """Create a ``field IS NULL`` condition."""
    return _leaf(field, Operator.IS_NULL)


def is_not_null(field: str) -> Condition:
    """Create a ``field IS NOT NULL`` condition."""
    return _leaf(field, Operator.IS_NOT_NULL)


def between(field: str, lo: Any, hi: Any) -> Condition:
    """Create a ``field BETWEEN lo AND hi`` condition."""
    return _leaf(field, Operator.BETWEEN, (lo, hi))


def in_(field: str, values: Iterable) -> Condition:
    """
    Create a ``field IN (...)`` condition.

    Iterables (other than strings and bytes) are materialized into a tuple so
    generators can be passed. Anything else is stored as given and rejected
    when the condition is combined.
    """
    if isinstance(values, Iterable) and not isinstance(values, (str, bytes)):
        values = tuple(values)
    return _leaf(field, Operator.IN, values)


def group(relation: Union[Relation, str], *conditions: Union[Condition, Sequence[Condition]]) -> Condition:
    """
    Create a parenthesized group of conditions joined by ``relation``.

    Conditions may be passed as separate arguments or as a single list.

    Example:
        group("OR", equal("doc_number", "89013"), equal("region", "ATLANTA"))
    """
    if len(conditions) == 1 and isinstance(conditions[0], (list, tuple)):
        conditions = tuple(conditions[0])
    return Condition(children=tuple(conditions), relation=Relation.parse(relation))


def and_(*conditions: Condition) -> Condition:
    """Group conditions with AND."""
    return group(Relation.AND, *conditions)


def or_(*conditions: Condition) -> Condition:
    """Group conditions with OR."""
    return group(Relation.OR, *conditions)


def format_time_value(value: Union[datetime, date]) -> str:
    """Format a date or datetime as ``YYYY-MM-DD HH:MM:SS`` for textual binding."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime("%Y-%m-%d %H:%M:%S")
