"""Cypher query builder framework.

This package provides a fluent interface for assembling Cypher queries clause
by clause, with every assembly problem reported once at the end.
"""

from .aggregator import ErrorAggregator
from .builder import CypherQueryBuilder
from .clauses import Condition, OrderBy, RemoveTarget, ReturnItem, WithItem
from .composer import ClauseComposer
from .interfaces import ClauseDescription, Renderable
from .patterns import (
    FullRelationship,
    NodePattern,
    OnlyNode,
    PartialRelationship,
    PatternResolver,
    QueryPattern,
    RelationshipPattern,
)
from .state import ClauseType
from .subquery import indent_subquery, render_call_block

__all__ = [
    "ClauseComposer",
    "ClauseDescription",
    "ClauseType",
    # Clause content
    "Condition",
    # Base query builder
    "CypherQueryBuilder",
    "ErrorAggregator",
    # Patterns
    "FullRelationship",
    "NodePattern",
    "OnlyNode",
    "OrderBy",
    "PartialRelationship",
    "PatternResolver",
    "QueryPattern",
    "RelationshipPattern",
    "RemoveTarget",
    "Renderable",
    "ReturnItem",
    "WithItem",
    "indent_subquery",
    "render_call_block",
]
