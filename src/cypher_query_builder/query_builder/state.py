"""Clause types for the Cypher query builder."""

from enum import Enum


class ClauseType(Enum):
    """Enum for Cypher clause types, valued by their exact keyword."""

    # Reading
    MATCH = "MATCH"
    OPTIONAL_MATCH = "OPTIONAL MATCH"
    WHERE = "WHERE"

    # Projection
    RETURN = "RETURN"
    WITH = "WITH"

    # Data manipulation
    CREATE = "CREATE"
    MERGE = "MERGE"
    DELETE = "DELETE"
    DETACH_DELETE = "DETACH DELETE"
    REMOVE = "REMOVE"

    # Ordering and pagination
    ORDER_BY = "ORDER BY"
    SKIP = "SKIP"
    LIMIT = "LIMIT"

    # Composition
    CALL = "CALL"
    UNION = "UNION"
    UNION_ALL = "UNION ALL"

    @property
    def keyword(self) -> str:
        """The literal keyword emitted for this clause."""
        return self.value
