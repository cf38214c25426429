"""
Tests for the condition constructors.
"""

from datetime import date, datetime

import pytest

from condsql.condition import (
    Condition,
    Operator,
    Relation,
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
from condsql.condition.types import InvalidRelationError


class TestLeafConstructors:
    """Test cases for leaf condition constructors."""

    @pytest.mark.parametrize(
        "constructor, operator",
        [
            (equal, Operator.EQUAL),
            (not_equal, Operator.NOT_EQUAL),
            (more, Operator.MORE),
            (less, Operator.LESS),
            (more_or_equal, Operator.MORE_OR_EQUAL),
            (less_or_equal, Operator.LESS_OR_EQUAL),
            (like, Operator.LIKE),
            (not_like, Operator.NOT_LIKE),
        ],
    )
    def test_scalar_constructors(self, constructor, operator):
        """Test that scalar constructors keep field, operator and value."""
        condition = constructor("salary", 20000)

        assert condition.field == "salary"
        assert condition.operator is operator
        assert condition.value == 20000
        assert condition.children == ()
        assert condition.is_leaf
        assert not condition.is_group

    def test_null_checks_have_no_value(self):
        """Test IS NULL / IS NOT NULL constructors."""
        assert is_null("deleted_at") == Condition("deleted_at", Operator.IS_NULL)
        assert is_not_null("deleted_at").operator is Operator.IS_NOT_NULL
        assert is_not_null("deleted_at").value is None

    def test_between_keeps_bounds_in_order(self):
        """Test BETWEEN stores (lo, hi)."""
        condition = between("age", 18, 65)

        assert condition.operator is Operator.BETWEEN
        assert condition.value == (18, 65)

    def test_in_materializes_iterables(self):
        """Test IN accepts lists, empty lists and generators."""
        assert in_("status", ["active", "pending"]).value == ("active", "pending")
        assert in_("id", (i for i in range(3))).value == (0, 1, 2)
        assert in_("id", []).value == ()

    def test_in_keeps_non_collections_as_given(self):
        """Test IN does not validate at construction time."""
        assert in_("status", "active").value == "active"
        assert in_("id", 5).value == 5

    def test_empty_field_is_accepted(self):
        """Test constructors perform no validation."""
        assert equal("", None).field == ""

    def test_operator_sql_text(self):
        """Test the operator to SQL mapping."""
        assert Operator.NOT_EQUAL.sql == "<>"
        assert Operator.NOT_LIKE.sql == "NOT LIKE"
        assert Operator.IS_NOT_NULL.sql == "IS NOT NULL"


class TestGroupConstructors:
    """Test cases for group construction."""

    def test_group_with_varargs(self):
        """Test group keeps children in order."""
        first, second = equal("a", 1), equal("b", 2)
        condition = group(Relation.OR, first, second)

        assert condition.is_group
        assert condition.children == (first, second)
        assert condition.relation is Relation.OR

    def test_group_with_list(self):
        """Test group accepts a single list of conditions."""
        children = [equal("a", 1), equal("b", 2)]

        assert group("and", children) == group(Relation.AND, *children)

    def test_group_relation_strings(self):
        """Test relation keywords are case-insensitive."""
        assert group("or").relation is Relation.OR
        assert group(" And ").relation is Relation.AND

    def test_group_rejects_unknown_relation(self):
        """Test unknown relations raise a structured error."""
        with pytest.raises(InvalidRelationError):
            group("XOR", equal("a", 1))

    def test_and_or_helpers(self):
        """Test and_/or_ shorthands and the Condition methods."""
        a, b = equal("a", 1), equal("b", 2)

        assert and_(a, b) == group(Relation.AND, a, b)
        assert or_(a, b) == group(Relation.OR, a, b)
        assert a.or_(b) == or_(a, b)
        assert a.and_(b) == and_(a, b)

    def test_conditions_are_immutable_values(self):
        """Test structural equality, hashing and immutability."""
        condition = group("OR", equal("a", 1), in_("b", [1, 2]))

        assert condition == group("OR", equal("a", 1), in_("b", [1, 2]))
        assert hash(condition) == hash(group("OR", equal("a", 1), in_("b", [1, 2])))
        with pytest.raises(AttributeError):
            condition.field = "other"


class TestFormatTimeValue:
    """Test cases for timestamp formatting."""

    def test_datetime(self):
        assert format_time_value(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"

    def test_date(self):
        assert format_time_value(date(2024, 1, 2)) == "2024-01-02 00:00:00"
