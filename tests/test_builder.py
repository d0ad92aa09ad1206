"""
Clause methods of CypherQueryBuilder: keywords, join rules, guards and the
deferred error model. No database is involved; only the assembled text and
the composite error are checked.
"""

import pytest

from cypher_query_builder import (
    BuilderFinalizedError,
    ClauseType,
    CompositeQueryError,
    Condition,
    CypherQueryBuilder,
    EmptyClauseError,
    InvalidArgumentError,
    NodePattern,
    OrderBy,
    QueryPattern,
    RemoveTarget,
    ReturnItem,
    WithItem,
)


def test_match_concatenates_patterns_without_separator(builder, person, acted_in, movie):
    query, error = builder.match(QueryPattern.node("n", "Person"), QueryPattern.full(person, acted_in, movie)).execute()

    assert error is None
    assert query == "MATCH (n:Person)(a:Person)-[r:ACTED_IN]->(m:Movie)"


@pytest.mark.parametrize(
    "method, keyword",
    [
        ("match", "MATCH"),
        ("optional_match", "OPTIONAL MATCH"),
        ("merge", "MERGE"),
        ("create", "CREATE"),
    ],
)
def test_pattern_clauses_emit_keyword_and_newline(method, keyword):
    builder = CypherQueryBuilder()
    getattr(builder, method)(QueryPattern.node("n"))
    builder.return_variables("n")

    query, error = builder.execute()

    assert error is None
    assert query == f"{keyword} (n)\nRETURN n"


@pytest.mark.parametrize(
    "method, keyword",
    [
        ("match", "MATCH"),
        ("optional_match", "OPTIONAL MATCH"),
        ("merge", "MERGE"),
        ("create", "CREATE"),
    ],
)
def test_pattern_clause_without_patterns_records_one_error(method, keyword):
    builder = CypherQueryBuilder()
    getattr(builder, method)()

    query, error = builder.execute()

    assert query == ""
    assert len(builder.errors) == 1
    assert isinstance(builder.errors[0], EmptyClauseError)
    assert keyword in str(builder.errors[0])
    assert str(error) == f"errors found: error empty {keyword} patterns -- total errors (1)"


def test_empty_pattern_inside_match_still_emits_clause(builder):
    query, error = builder.match(QueryPattern(), QueryPattern.node("n")).execute()

    assert query == "MATCH (n)"
    assert str(error) == "errors found: error empty pattern in MATCH clause -- total errors (1)"


def test_where_concatenates_conditions(builder):
    builder.match(QueryPattern.node("n"))
    builder.where(
        Condition(expression="n.age > 18"),
        Condition(expression="n.name = 'Ann'", operator="OR"),
        Condition(expression="n.deleted", operator="AND", negate=True),
    )

    assert builder.build() == "MATCH (n)\nWHERE n.age > 18 OR n.name = 'Ann' AND NOT n.deleted"


def test_where_without_conditions(builder):
    query, error = builder.where().execute()

    assert query == ""
    assert error is not None
    assert [str(e) for e in builder.errors] == ["error empty Where clause"]


def test_return_joins_items(builder):
    builder.return_clause(ReturnItem(expression="a"), ReturnItem(expression="b"), ReturnItem(expression="c"))
    assert builder.build() == "RETURN a, b, c"


def test_with_joins_items_and_aliases(builder):
    builder.with_clause(WithItem(expression="n"), WithItem(expression="count(r)", alias="total"))
    assert builder.build() == "WITH n, count(r) AS total"


def test_return_raw_text_is_not_rewritten(builder, static):
    query = builder.return_clause(static("a"), static("b")).build()
    assert query == "RETURN a, b"


@pytest.mark.parametrize(
    "method, message",
    [("return_clause", "error empty Return clause"), ("with_clause", "error empty WITH clause")],
)
def test_projection_without_items(method, message):
    builder = CypherQueryBuilder()
    getattr(builder, method)()

    query, error = builder.execute()

    assert query == ""
    assert [str(e) for e in builder.errors] == [message]
    assert isinstance(error, CompositeQueryError)


def test_failed_return_item_leaves_a_gap(builder, failing):
    query, error = builder.return_clause(ReturnItem(expression="a"), failing("no such item")).execute()

    assert query == "RETURN a, "
    assert str(error) == "errors found: no such item -- total errors (1)"


def test_delete_and_detach_delete(builder):
    builder.delete(RemoveTarget(items=["n", "r"]))
    builder.delete(RemoveTarget(items=["m"]), detach=True)

    assert builder.build() == "DELETE n, r\nDETACH DELETE m"
    assert builder.clauses == (ClauseType.DELETE, ClauseType.DETACH_DELETE)


@pytest.mark.parametrize("target", [None, RemoveTarget()])
def test_delete_without_target(builder, target):
    query, error = builder.delete(target, detach=True).execute()

    assert query == ""
    assert str(error) == "errors found: error empty Delete clause -- total errors (1)"


def test_remove_emits_rendered_target(builder):
    assert builder.remove(RemoveTarget(items=["n.age", "n:Temp"])).build() == "REMOVE n.age, n:Temp"


def test_remove_trims_one_trailing_separator(builder, static):
    # RemoveTarget never renders a trailing separator; custom content may.
    assert builder.remove(static("n.age, ")).build() == "REMOVE n.age"


def test_plain_renderables_are_accepted_as_descriptions(builder, static):
    builder.delete(static("n"), detach=True)
    builder.remove(static("n.age"))
    builder.order_by(static("n.name"))

    query, error = builder.execute()

    assert error is None
    assert query == "DETACH DELETE n\nREMOVE n.age\nORDER BY n.name"


def test_remove_without_target(builder):
    _, error = builder.remove(None).execute()
    assert str(error) == "errors found: error empty Remove clause -- total errors (1)"


@pytest.mark.parametrize("all_, expected", [(True, "UNION ALL"), (False, "UNION")])
def test_union(all_, expected):
    builder = CypherQueryBuilder()
    builder.return_variables("a").union(all_).return_variables("b")

    assert builder.build() == f"RETURN a\n{expected}\nRETURN b"


def test_order_by(builder):
    builder.order_by(OrderBy(items=["n.name", "n.age"], descending=True))
    assert builder.build() == "ORDER BY n.name, n.age DESC"


@pytest.mark.parametrize("order", [None, OrderBy()])
def test_order_by_empty(builder, order):
    _, error = builder.order_by(order).execute()
    assert str(error) == "errors found: error empty OrderBy clause -- total errors (1)"


@pytest.mark.parametrize("count", [0, 25, -1])
def test_limit_is_a_literal(count):
    builder = CypherQueryBuilder()
    assert builder.limit(count).build() == f"LIMIT {count}"


def test_skip_and_paginate(builder):
    builder.return_variables("n").paginate(page=3, page_size=20)

    assert builder.build() == "RETURN n\nSKIP 40\nLIMIT 20"
    assert builder.clauses == (ClauseType.RETURN, ClauseType.SKIP, ClauseType.LIMIT)


@pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0)])
def test_paginate_out_of_range(builder, page, page_size):
    query, error = builder.paginate(page, page_size).execute()

    assert query == ""
    assert isinstance(builder.errors[0], InvalidArgumentError)
    assert error is not None


def test_match_helpers(builder, movie):
    builder.match_node("Person", "p", name="Ann")
    builder.match_related(NodePattern("p"), "ACTED_IN", movie, rel_variable="r", min_hops=1, max_hops=2)

    assert builder.build() == "MATCH (p:Person {name: 'Ann'})\nMATCH (p)-[r:ACTED_IN*1..2]->(m:Movie)"


# ── Deferred errors ──────────────────────────────────────────────────


def test_guard_failure_leaves_text_untouched_and_chain_continues(builder):
    result = builder.match(QueryPattern.node("n")).where().return_clause(ReturnItem(expression="n"))

    assert result is builder
    assert builder.has_errors
    query, error = builder.execute()
    assert query == "MATCH (n)\nRETURN n"
    assert str(error) == "errors found: error empty Where clause -- total errors (1)"


def test_independent_errors_all_surface_in_call_order(builder, failing):
    builder.match()
    builder.where(Condition(expression="n.x = 1"), failing("bad condition"))
    builder.return_clause()
    builder.order_by(None)

    query, error = builder.execute()

    assert query == "WHERE n.x = 1"
    assert str(error) == (
        "errors found: error empty MATCH patterns;bad condition;"
        "error empty Return clause;error empty OrderBy clause -- total errors (4)"
    )
    assert len(error) == 4
    assert list(error.errors) == list(builder.errors)


def test_execute_without_errors_trims_one_newline(builder):
    builder.match(QueryPattern.node("n"))

    query, error = builder.execute()

    assert error is None
    assert query == "MATCH (n)"
    assert not query.endswith("\n")


def test_execute_on_empty_builder():
    assert CypherQueryBuilder().execute() == ("", None)


def test_build_raises_composite_error(builder):
    builder.return_clause()

    with pytest.raises(CompositeQueryError, match=r"total errors \(1\)"):
        builder.build()


# ── Finalization ─────────────────────────────────────────────────────


def test_execute_is_terminal_and_cached(builder):
    builder.match(QueryPattern.node("n"))
    first = builder.execute()

    assert builder.is_finalized
    assert builder.execute() is first

    with pytest.raises(BuilderFinalizedError, match="RETURN clause added after execute"):
        builder.return_variables("n")

    with pytest.raises(BuilderFinalizedError):
        builder.limit(1)
