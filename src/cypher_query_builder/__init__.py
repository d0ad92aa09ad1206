"""Clause-by-clause Cypher query assembly."""

from .core.errors import (
    BuilderFinalizedError,
    CompositeQueryError,
    EmptyClauseError,
    EmptyPatternError,
    InvalidArgumentError,
    RenderError,
)
from .query_builder import (
    ClauseType,
    Condition,
    CypherQueryBuilder,
    FullRelationship,
    NodePattern,
    OnlyNode,
    OrderBy,
    PartialRelationship,
    QueryPattern,
    RelationshipPattern,
    RemoveTarget,
    Renderable,
    ReturnItem,
    WithItem,
)

__all__ = [
    "BuilderFinalizedError",
    "ClauseType",
    "CompositeQueryError",
    "Condition",
    "CypherQueryBuilder",
    "EmptyClauseError",
    "EmptyPatternError",
    "FullRelationship",
    "InvalidArgumentError",
    "NodePattern",
    "OnlyNode",
    "OrderBy",
    "PartialRelationship",
    "QueryPattern",
    "RelationshipPattern",
    "RemoveTarget",
    "RenderError",
    "Renderable",
    "ReturnItem",
    "WithItem",
]
