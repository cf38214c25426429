"""
Shared fixtures for the condsql test suite.
"""

import pytest

from condsql import equal, group, like, more_or_equal


@pytest.fixture
def office_group():
    """OR-group matching either a document number or a region."""
    return group("OR", equal("doc_number", "89013"), equal("region", "ATLANTA"))


@pytest.fixture
def employee_conditions():
    """Flat employee filter without any groups."""
    return [
        equal("id", 1),
        equal("name", "John"),
        like("position", "%manager%"),
        more_or_equal("salary", 20000),
    ]
