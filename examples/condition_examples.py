"""
Examples of building parameterized WHERE fragments with condsql.

The fragments are meant to be embedded into a larger statement and executed
by a driver; nothing here touches a database.
"""

from condsql import (
    ParamStyle,
    Relation,
    between,
    combine,
    equal,
    group,
    in_,
    is_null,
    like,
    more_or_equal,
    parse_where_clause,
    FilterParser,
)


def basic_conditions():
    """Flat conditions joined with AND, one OR group at the end."""
    conditions = [
        equal("id", 1),
        equal("name", "John"),
        like("position", "%manager%"),
        more_or_equal("salary", 20000),
        group("OR", equal("doc_number", "89013"), equal("region", "ATLANTA")),
    ]
    sql, params = combine(conditions, Relation.AND)
    print(f"SQL: {sql}")
    print(f"Parameters: {params}")
    print()


def user_input_is_bound():
    """Values never end up in the SQL text."""
    user_name = "John'; DROP TABLE users; --"
    sql, params = combine([equal("name", user_name), is_null("deleted_at")])
    print(f"SQL: {sql}")
    print(f"Parameters: {params}")
    print()


def asyncpg_placeholders():
    """Numbered placeholders continuing after parameters already in the query."""
    sql, params = combine(
        [in_("status", ["active", "pending"]), between("age", 18, 65)],
        paramstyle=ParamStyle.NUMERIC,
        start_index=2,
    )
    print(f"SQL: SELECT * FROM users WHERE tenant_id = $1 AND {sql}")
    print(f"Parameters: {['tenant-1', *params]}")
    print("# rows = await connection.fetch(query, *params)")
    print()


def json_filter_document():
    """Filter documents coming from an API request body."""
    where = parse_where_clause("""
    {
        "operator": "and",
        "conditions": [
            {"field": "age", "operator": "between", "value": [18, 65]},
            {
                "type": "logical",
                "operator": "or",
                "conditions": [
                    {"field": "region", "operator": "eq", "value": "ATLANTA"},
                    {"field": "region", "operator": "is_null"}
                ]
            }
        ]
    }
    """)
    sql, params = FilterParser().build(where, paramstyle="format")
    print(f"SQL: {sql}")
    print(f"Parameters: {params}")
    print()


if __name__ == "__main__":
    basic_conditions()
    user_input_is_bound()
    asyncpg_placeholders()
    json_filter_document()
