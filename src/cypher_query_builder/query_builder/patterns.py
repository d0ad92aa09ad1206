"""Pattern builders for Cypher queries.

This module provides node and relationship renderers, the three pattern
shapes a clause can receive, and the resolver that decides which shape a
``QueryPattern`` carries.
"""

import re
from typing import Any, Literal

from cypher_query_builder.core.base import ClauseErrorDetails
from cypher_query_builder.core.errors import EmptyPatternError, RenderError
from cypher_query_builder.query_builder.aggregator import ErrorAggregator
from cypher_query_builder.query_builder.composer import ClauseComposer

Direction = Literal["->", "<-", "-"]

_IDENTIFIER = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|`[^`]+`)$")


def _check_identifier(value: str, kind: str) -> None:
    if not _IDENTIFIER.match(value):
        raise RenderError(f"error invalid {kind} {value!r}")


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str) and not value.startswith("$"):
        # String literals should be quoted
        return f"'{value}'"
    # Parameters or non-strings
    return str(value)


def _render_properties(properties: dict[str, Any]) -> str:
    prop_parts: list[str] = []
    for key, value in properties.items():
        _check_identifier(key, "property key")
        prop_parts.append(f"{key}: {_render_value(value)}")
    return f" {{{', '.join(prop_parts)}}}"


class NodePattern:
    """Renderer for Cypher node patterns.

    This class represents a node pattern like (n:Label {prop: value}).
    A node with no variable, labels or properties renders as ``()``.
    """

    def __init__(
        self,
        variable: str = "",
        labels: list[str] | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        """Initialize a node pattern.

        Args:
            variable: Variable name for the node (can be empty)
            labels: Node labels
            properties: Node properties
        """
        self.variable: str = variable
        self.labels: list[str] = labels or []
        self.properties: dict[str, Any] = properties or {}

    def render(self) -> str:
        """Render the Cypher node pattern string.

        Raises:
            RenderError: If the variable, a label or a property key is not a valid identifier
        """
        pattern_parts: list[str] = ["("]

        if self.variable:
            _check_identifier(self.variable, "node variable")
            pattern_parts.append(self.variable)

        if self.labels:
            for label in self.labels:
                _check_identifier(label, "node label")
            pattern_parts.append(f":{':'.join(self.labels)}")

        if self.properties:
            pattern_parts.append(_render_properties(self.properties))

        pattern_parts.append(")")

        return "".join(pattern_parts)

    def __repr__(self) -> str:
        return f"NodePattern(variable={self.variable!r}, labels={self.labels!r}, properties={self.properties!r})"


class RelationshipPattern:
    """Renderer for Cypher relationship patterns.

    This class represents a relationship connector like -[r:TYPE {prop: value}]->,
    including its direction arrows.
    """

    def __init__(
        self,
        variable: str = "",
        types: list[str] | None = None,
        properties: dict[str, Any] | None = None,
        direction: Direction = "->",
        min_hops: int | None = None,
        max_hops: int | None = None,
    ) -> None:
        """Initialize a relationship pattern.

        Args:
            variable: Variable name for the relationship (can be empty)
            types: Relationship types, rendered as alternatives
            properties: Relationship properties
            direction: Direction of the relationship (-> outgoing, <- incoming, - any)
            min_hops: Minimum number of hops for variable-length
            max_hops: Maximum number of hops for variable-length
        """
        self.variable: str = variable
        self.types: list[str] = types or []
        self.properties: dict[str, Any] = properties or {}
        self.direction: Direction = direction
        self.min_hops: int | None = min_hops
        self.max_hops: int | None = max_hops

    def with_length(self, min_hops: int | None = None, max_hops: int | None = None) -> "RelationshipPattern":
        """Set the length for variable-length relationships.

        Returns:
            Self for method chaining
        """
        self.min_hops = min_hops
        self.max_hops = max_hops
        return self

    def _render_length(self) -> str:
        if self.min_hops is None and self.max_hops is None:
            return ""
        if self.min_hops is not None and self.max_hops is not None and self.min_hops > self.max_hops:
            raise RenderError(f"error relationship min_hops ({self.min_hops}) greater than max_hops ({self.max_hops})")

        length_parts: list[str] = []
        if self.min_hops is not None:
            length_parts.append(str(self.min_hops))
        length_parts.append("..")
        if self.max_hops is not None:
            length_parts.append(str(self.max_hops))
        return f"*{''.join(length_parts)}"

    def render(self) -> str:
        """Render the Cypher relationship connector string.

        Raises:
            RenderError: On an invalid identifier, an unknown direction or an inverted hop range
        """
        pattern_parts: list[str] = ["["]

        if self.variable:
            _check_identifier(self.variable, "relationship variable")
            pattern_parts.append(self.variable)

        if self.types:
            for type_ in self.types:
                _check_identifier(type_, "relationship type")
            pattern_parts.append(f":{'|'.join(self.types)}")

        pattern_parts.append(self._render_length())

        if self.properties:
            pattern_parts.append(_render_properties(self.properties))

        pattern_parts.append("]")
        body = "".join(pattern_parts)

        if self.direction == "->":
            return f"-{body}->"
        if self.direction == "<-":
            return f"<-{body}-"
        if self.direction == "-":
            return f"-{body}-"
        raise RenderError(f"error unknown relationship direction {self.direction!r}")


class OnlyNode:
    """Pattern shape holding a single node."""

    def __init__(self, node: NodePattern) -> None:
        self.node = node

    def render(self) -> str:
        return self.node.render()


class PartialRelationship:
    """Pattern shape with one known endpoint: (a)-[r]->()."""

    def __init__(self, start: NodePattern, relationship: RelationshipPattern) -> None:
        self.start = start
        self.relationship = relationship

    def render(self) -> str:
        return f"{self.start.render()}{self.relationship.render()}()"


class FullRelationship:
    """Pattern shape with both endpoints known: (a)-[r]->(b)."""

    def __init__(self, start: NodePattern, relationship: RelationshipPattern, end: NodePattern) -> None:
        self.start = start
        self.relationship = relationship
        self.end = end

    def render(self) -> str:
        return f"{self.start.render()}{self.relationship.render()}{self.end.render()}"


class QueryPattern:
    """Pattern description carrying at most one of three shapes.

    Presence of a shape is an explicit ``is not None`` check, so a shape
    wrapping an entirely empty node is still populated. Setting more than one
    shape is not rejected: the resolver takes the first in the order
    only_node, partial_relationship, full_relationship.
    """

    def __init__(
        self,
        *,
        only_node: OnlyNode | None = None,
        partial_relationship: PartialRelationship | None = None,
        full_relationship: FullRelationship | None = None,
    ) -> None:
        self.only_node = only_node
        self.partial_relationship = partial_relationship
        self.full_relationship = full_relationship

    @classmethod
    def node(cls, variable: str = "", *labels: str, **properties: Any) -> "QueryPattern":
        """Shorthand for a bare node pattern."""
        return cls(only_node=OnlyNode(NodePattern(variable, list(labels), properties)))

    @classmethod
    def partial(cls, start: NodePattern, relationship: RelationshipPattern) -> "QueryPattern":
        return cls(partial_relationship=PartialRelationship(start, relationship))

    @classmethod
    def full(cls, start: NodePattern, relationship: RelationshipPattern, end: NodePattern) -> "QueryPattern":
        return cls(full_relationship=FullRelationship(start, relationship, end))

    @property
    def populated(self) -> list[str]:
        """Names of the shapes that are set, in resolution order."""
        return [
            name
            for name in ("only_node", "partial_relationship", "full_relationship")
            if getattr(self, name) is not None
        ]

    @property
    def is_empty(self) -> bool:
        return not self.populated


class PatternResolver:
    """Resolve a pattern description to text.

    Rendering failures and empty descriptions are recorded in the aggregator;
    resolution itself never raises.
    """

    def __init__(self, aggregator: ErrorAggregator, composer: ClauseComposer) -> None:
        self._aggregator = aggregator
        self._composer = composer

    def resolve(self, pattern: QueryPattern, clause: str, index: int = 0) -> str:
        """Render the highest-priority populated shape of a pattern.

        Args:
            pattern: The pattern description
            clause: Keyword of the clause being assembled
            index: Position of the pattern within the clause

        Returns:
            The rendered pattern, or an empty string
        """
        for shape in (pattern.only_node, pattern.partial_relationship, pattern.full_relationship):
            if shape is not None:
                return self._composer.render_one(shape, clause, index)

        self._aggregator.record(
            EmptyPatternError(
                f"error empty pattern in {clause} clause",
                details=ClauseErrorDetails(
                    source="pattern_resolver",
                    operation="resolve",
                    clause=clause,
                    item_index=index,
                ),
            ),
            clause=clause,
        )
        return ""

    def resolve_all(self, patterns: tuple[QueryPattern, ...] | list[QueryPattern], clause: str) -> str:
        """Resolve every pattern and concatenate the results with no separator."""
        return "".join(self.resolve(pattern, clause, index) for index, pattern in enumerate(patterns))
