"""Main Cypher query builder implementation.

This module provides the core CypherQueryBuilder class with a fluent interface
for assembling Cypher queries clause by clause.
"""

from structlog.typing import FilteringBoundLogger

from cypher_query_builder.core.base import ClauseErrorDetails
from cypher_query_builder.core.errors import (
    BuilderFinalizedError,
    CompositeQueryError,
    EmptyClauseError,
    InvalidArgumentError,
)
from cypher_query_builder.core.logging import get_logger
from cypher_query_builder.query_builder.aggregator import ErrorAggregator
from cypher_query_builder.query_builder.clauses import Condition, OrderBy, RemoveTarget, ReturnItem, WithItem
from cypher_query_builder.query_builder.composer import ClauseComposer
from cypher_query_builder.query_builder.helpers import QueryHelpers
from cypher_query_builder.query_builder.interfaces import ClauseDescription, Renderable
from cypher_query_builder.query_builder.pagination import PaginationMixin
from cypher_query_builder.query_builder.patterns import PatternResolver, QueryPattern
from cypher_query_builder.query_builder.state import ClauseType
from cypher_query_builder.query_builder.subquery import render_call_block

logger: FilteringBoundLogger = get_logger(name=__name__)


class CypherQueryBuilder(PaginationMixin, QueryHelpers):
    """Fluent Cypher query builder with deferred error reporting.

    Each clause method appends to the query text and returns the builder.
    Problems (empty clauses, empty patterns, failed renders) never interrupt
    the chain; they are recorded in order and reported once by ``execute``.

    A builder is a single-owner handle: it has no internal locking and must
    not be mutated from several threads without external synchronization.
    ``execute`` is terminal; clause methods called afterwards raise
    ``BuilderFinalizedError``.

    Example:
        ```python
        query, error = (
            CypherQueryBuilder()
            .match(QueryPattern.node("n", "Person"))
            .where(Condition(expression="n.age > 18"))
            .return_clause(ReturnItem(expression="n"))
            .execute()
        )
        ```
    """

    def __init__(self) -> None:
        """Initialize a new, empty Cypher query builder."""
        self._query: str = ""
        self._clauses: list[ClauseType] = []
        self._aggregator = ErrorAggregator()
        self._composer = ClauseComposer(self._aggregator)
        self._resolver = PatternResolver(self._aggregator, self._composer)
        self._result: tuple[str, CompositeQueryError | None] | None = None

    @property
    def clauses(self) -> tuple[ClauseType, ...]:
        """Clauses emitted so far, in call order."""
        return tuple(self._clauses)

    @property
    def errors(self) -> tuple[Exception, ...]:
        """Errors recorded so far, in recording order."""
        return self._aggregator.errors

    @property
    def has_errors(self) -> bool:
        return bool(self._aggregator)

    @property
    def is_finalized(self) -> bool:
        return self._result is not None

    def _ensure_open(self, clause_type: ClauseType) -> None:
        if self._result is not None:
            raise BuilderFinalizedError(
                f"error {clause_type.keyword} clause added after execute",
                details=ClauseErrorDetails(source="query_builder", operation="append", clause=clause_type.keyword),
            )

    def _append_clause(self, clause_type: ClauseType, text: str) -> None:
        self._query += text
        self._clauses.append(clause_type)

    def _record_empty(self, clause_type: ClauseType, message: str) -> None:
        self._aggregator.record(
            EmptyClauseError(
                message,
                details=ClauseErrorDetails(source="query_builder", operation="guard", clause=clause_type.keyword),
            ),
            clause=clause_type.keyword,
        )

    def _pattern_clause(self, clause_type: ClauseType, patterns: tuple[QueryPattern, ...]) -> "CypherQueryBuilder":
        self._ensure_open(clause_type)

        if not patterns:
            self._record_empty(clause_type, f"error empty {clause_type.keyword} patterns")
            return self

        query = clause_type.keyword + " "
        query += self._resolver.resolve_all(patterns, clause_type.keyword)
        query += "\n"
        self._append_clause(clause_type, query)

        return self

    def _description_is_empty(self, description: Renderable | None) -> bool:
        if description is None:
            return True
        return isinstance(description, ClauseDescription) and description.is_empty

    def match(self, *patterns: QueryPattern) -> "CypherQueryBuilder":
        """Add a MATCH clause to the query.

        Args:
            *patterns: Pattern descriptions, concatenated with no separator

        Returns:
            Self for method chaining

        Example:
            ```python
            query.match(QueryPattern.node("n", "Person", name="John"))
            ```
        """
        return self._pattern_clause(ClauseType.MATCH, patterns)

    def optional_match(self, *patterns: QueryPattern) -> "CypherQueryBuilder":
        """Add an OPTIONAL MATCH clause to the query."""
        return self._pattern_clause(ClauseType.OPTIONAL_MATCH, patterns)

    def merge(self, *patterns: QueryPattern) -> "CypherQueryBuilder":
        """Add a MERGE clause to the query."""
        return self._pattern_clause(ClauseType.MERGE, patterns)

    def create(self, *patterns: QueryPattern) -> "CypherQueryBuilder":
        """Add a CREATE clause to the query."""
        return self._pattern_clause(ClauseType.CREATE, patterns)

    def delete(self, target: RemoveTarget | Renderable | None, detach: bool = False) -> "CypherQueryBuilder":
        """Add a DELETE or DETACH DELETE clause to the query.

        Args:
            target: Variables to delete
            detach: Emit DETACH DELETE instead of DELETE

        Returns:
            Self for method chaining

        Example:
            ```python
            query.delete(RemoveTarget(items=["n"]), detach=True)
            ```
        """
        clause_type = ClauseType.DETACH_DELETE if detach else ClauseType.DELETE
        self._ensure_open(clause_type)

        if self._description_is_empty(target):
            self._record_empty(clause_type, "error empty Delete clause")
            return self

        query = clause_type.keyword + " "
        query += self._composer.render_one(target, clause_type.keyword)
        query += "\n"
        self._append_clause(clause_type, query)

        return self

    def where(self, *conditions: Condition | Renderable) -> "CypherQueryBuilder":
        """Add a WHERE clause to the query.

        Conditions are concatenated with no separator; each one supplies its
        own boolean operator text.

        Args:
            *conditions: Conditions to combine

        Returns:
            Self for method chaining

        Example:
            ```python
            query.where(
                Condition(expression="n.age > 18"),
                Condition(expression="n.name STARTS WITH 'J'", operator="AND"),
            )
            ```
        """
        self._ensure_open(ClauseType.WHERE)

        if not conditions:
            self._record_empty(ClauseType.WHERE, "error empty Where clause")
            return self

        query = "WHERE "
        query += self._composer.concat(conditions, ClauseType.WHERE.keyword)
        query += "\n"
        self._append_clause(ClauseType.WHERE, query)

        return self

    def _projection(
        self, clause_type: ClauseType, items: tuple[Renderable, ...], label: str
    ) -> "CypherQueryBuilder":
        self._ensure_open(clause_type)

        if not items:
            self._record_empty(clause_type, f"error empty {label} clause")
            return self

        query = clause_type.keyword + " "
        for res in self._composer.compose(items, clause_type.keyword):
            query += res
            query += ", "
        query = query.removesuffix(", ")
        query += "\n"
        self._append_clause(clause_type, query)

        return self

    def return_clause(self, *items: ReturnItem | Renderable) -> "CypherQueryBuilder":
        """Add a RETURN clause to the query.

        Args:
            *items: Items to return, joined with ", "

        Returns:
            Self for method chaining

        Example:
            ```python
            query.return_clause(ReturnItem(expression="n"), ReturnItem(expression="count(r)", alias="total"))
            ```
        """
        return self._projection(ClauseType.RETURN, items, "Return")

    def with_clause(self, *items: WithItem | Renderable) -> "CypherQueryBuilder":
        """Add a WITH clause to the query.

        Args:
            *items: Items to carry over, joined with ", "

        Returns:
            Self for method chaining
        """
        return self._projection(ClauseType.WITH, items, "WITH")

    def remove(self, target: RemoveTarget | Renderable | None) -> "CypherQueryBuilder":
        """Add a REMOVE clause to the query.

        Args:
            target: Properties or labels to remove

        Returns:
            Self for method chaining

        Example:
            ```python
            query.remove(RemoveTarget(items=["n.age", "n:Temp"]))
            ```
        """
        self._ensure_open(ClauseType.REMOVE)

        if self._description_is_empty(target):
            self._record_empty(ClauseType.REMOVE, "error empty Remove clause")
            return self

        query = "REMOVE "
        query += self._composer.concat([target], ClauseType.REMOVE.keyword)
        query = query.removesuffix(", ")
        query += "\n"
        self._append_clause(ClauseType.REMOVE, query)

        return self

    def union(self, all_: bool = False) -> "CypherQueryBuilder":
        """Add a UNION (or UNION ALL) separator to the query."""
        clause_type = ClauseType.UNION_ALL if all_ else ClauseType.UNION
        self._ensure_open(clause_type)
        self._append_clause(clause_type, clause_type.keyword + "\n")
        return self

    def order_by(self, order: OrderBy | Renderable | None) -> "CypherQueryBuilder":
        """Add an ORDER BY clause to the query.

        Args:
            order: Sort expressions and direction

        Returns:
            Self for method chaining
        """
        self._ensure_open(ClauseType.ORDER_BY)

        if self._description_is_empty(order):
            self._record_empty(ClauseType.ORDER_BY, "error empty OrderBy clause")
            return self

        query = "ORDER BY "
        query += self._composer.render_one(order, ClauseType.ORDER_BY.keyword)
        query += "\n"
        self._append_clause(ClauseType.ORDER_BY, query)

        return self

    def call(self, subquery: "CypherQueryBuilder") -> "CypherQueryBuilder":
        """Embed another builder's query as an indented CALL { ... } block.

        The nested builder is executed (or its cached result reused if it was
        already executed). Its composite error, if any, is recorded here as a
        single error.

        Args:
            subquery: The nested builder

        Returns:
            Self for method chaining
        """
        self._ensure_open(ClauseType.CALL)

        if subquery is self:
            self._aggregator.record(
                InvalidArgumentError(
                    "error CALL subquery is the enclosing builder",
                    details=ClauseErrorDetails(source="query_builder", operation="call", clause="CALL"),
                ),
                clause=ClauseType.CALL.keyword,
            )
            return self

        text, error = subquery.execute()
        if error is not None:
            self._aggregator.record(error, clause=ClauseType.CALL.keyword)

        self._append_clause(ClauseType.CALL, render_call_block(text))

        return self

    def execute(self) -> tuple[str, CompositeQueryError | None]:
        """Finalize the query.

        Removes one trailing newline and builds the composite error from every
        recorded error. The text is returned even when there are errors, so
        callers must check the error before trusting it. Calling ``execute``
        again returns the same result.

        Returns:
            Tuple of (query, error or None)
        """
        if self._result is not None:
            return self._result

        self._query = self._query.removesuffix("\n")
        error = self._aggregator.build()
        self._result = (self._query, error)

        logger.debug(
            "Finalized Cypher query",
            clauses=[clause.keyword for clause in self._clauses],
            error_count=len(self._aggregator),
            query_length=len(self._query),
        )

        return self._result

    def build(self) -> str:
        """Finalize the query and return its text.

        Returns:
            The Cypher query

        Raises:
            CompositeQueryError: If any error was recorded during assembly
        """
        query, error = self.execute()
        if error is not None:
            raise error
        return query
