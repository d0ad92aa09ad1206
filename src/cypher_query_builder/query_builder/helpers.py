"""Helper methods for the Cypher query builder.

This module provides convenient helper methods that extend the query builder
with common patterns and operations.
"""

from typing import TYPE_CHECKING, Any

from cypher_query_builder.query_builder.clauses import ReturnItem
from cypher_query_builder.query_builder.patterns import NodePattern, QueryPattern, RelationshipPattern

if TYPE_CHECKING:
    from cypher_query_builder.query_builder.builder import CypherQueryBuilder


class QueryHelpers:
    """Mixin providing helper methods for common query patterns."""

    def match_node(
        self: "CypherQueryBuilder",
        label: str | None = None,
        variable: str = "n",
        **properties: Any,
    ) -> "CypherQueryBuilder":
        """Match a single node.

        Args:
            label: Node label (can be None)
            variable: Variable alias for the node
            **properties: Properties to match on

        Returns:
            Self for method chaining

        Example:
            ```python
            query.match_node("Person", "p", name="John")  # MATCH (p:Person {name: 'John'})
            ```
        """
        labels = [label] if label else []
        return self.match(QueryPattern.node(variable, *labels, **properties))

    def match_related(
        self: "CypherQueryBuilder",
        start: NodePattern,
        rel_type: str,
        end: NodePattern,
        rel_variable: str = "",
        min_hops: int | None = None,
        max_hops: int | None = None,
    ) -> "CypherQueryBuilder":
        """Match an outgoing relationship between two known nodes.

        Args:
            start: Source node
            rel_type: Relationship type
            end: Target node
            rel_variable: Variable alias for the relationship
            min_hops: Minimum number of hops for variable-length
            max_hops: Maximum number of hops for variable-length

        Returns:
            Self for method chaining
        """
        relationship = RelationshipPattern(
            variable=rel_variable,
            types=[rel_type],
            min_hops=min_hops,
            max_hops=max_hops,
        )
        return self.match(QueryPattern.full(start, relationship, end))

    def return_variables(self: "CypherQueryBuilder", *names: str) -> "CypherQueryBuilder":
        """RETURN the given variables as-is."""
        return self.return_clause(*(ReturnItem(expression=name) for name in names))
