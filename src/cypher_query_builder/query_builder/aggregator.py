"""Deferred error collection for the query builder."""

from structlog.typing import FilteringBoundLogger

from cypher_query_builder.core.errors import CompositeQueryError
from cypher_query_builder.core.logging import get_logger

logger: FilteringBoundLogger = get_logger(name=__name__)


class ErrorAggregator:
    """Append-only, ordered log of failures recorded during assembly.

    Recording never raises and never stops assembly. The single composite
    error is only materialized by ``build``.
    """

    def __init__(self) -> None:
        self._errors: list[Exception] = []

    def record(self, error: Exception, clause: str | None = None) -> None:
        """Record a failure.

        Args:
            error: The failure to record
            clause: Keyword of the clause being assembled, for logging only
        """
        self._errors.append(error)
        logger.debug(
            "Recorded query assembly error",
            clause=clause,
            error=error,
            message=str(error),
            position=len(self._errors),
        )

    @property
    def errors(self) -> tuple[Exception, ...]:
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def build(self) -> CompositeQueryError | None:
        """Build the composite error, or None when nothing was recorded."""
        if not self._errors:
            return None
        return CompositeQueryError(self._errors)
