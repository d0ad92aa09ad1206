"""Pagination mixin for the Cypher query builder.

This module provides a separate mixin for pagination operations
to keep the core query builder clean.
"""

from typing import TYPE_CHECKING, Self

from cypher_query_builder.core.base import ClauseErrorDetails
from cypher_query_builder.core.errors import InvalidArgumentError
from cypher_query_builder.query_builder.state import ClauseType

if TYPE_CHECKING:
    from cypher_query_builder.query_builder.aggregator import ErrorAggregator


class PaginationMixin:
    """Mixin adding LIMIT, SKIP and page-based pagination.

    Mixed into any builder exposing ``_append_clause``, ``_ensure_open`` and
    an ``_aggregator``.
    """

    _aggregator: "ErrorAggregator"

    def limit(self, count: int) -> Self:
        """Add a LIMIT clause to the query.

        Args:
            count: Maximum number of results to return, emitted as a literal

        Returns:
            Self for method chaining
        """
        self._ensure_open(ClauseType.LIMIT)  # type: ignore[attr-defined]
        self._append_clause(ClauseType.LIMIT, f"LIMIT {count}\n")  # type: ignore[attr-defined]
        return self

    def skip(self, count: int) -> Self:
        """Add a SKIP clause to the query.

        Args:
            count: Number of results to skip, emitted as a literal

        Returns:
            Self for method chaining
        """
        self._ensure_open(ClauseType.SKIP)  # type: ignore[attr-defined]
        self._append_clause(ClauseType.SKIP, f"SKIP {count}\n")  # type: ignore[attr-defined]
        return self

    def paginate(self, page: int, page_size: int) -> Self:
        """Add SKIP and LIMIT based on page number and size.

        An out-of-range page or page size is recorded as an error and nothing
        is emitted.

        Args:
            page: Page number (1-based)
            page_size: Number of items per page

        Returns:
            Self for method chaining
        """
        self._ensure_open(ClauseType.SKIP)  # type: ignore[attr-defined]

        if page < 1 or page_size < 1:
            field = "page" if page < 1 else "page_size"
            self._aggregator.record(
                InvalidArgumentError(
                    f"error paginate {field} must be greater than or equal to 1",
                    details=ClauseErrorDetails(source="pagination", operation="paginate", clause="SKIP"),
                ),
                clause=ClauseType.SKIP.keyword,
            )
            return self

        return self.skip((page - 1) * page_size).limit(page_size)
