"""Best-effort rendering of clause content objects."""

from cypher_query_builder.core.base import ApplicationError, ClauseErrorDetails
from cypher_query_builder.core.errors import RenderError
from cypher_query_builder.query_builder.aggregator import ErrorAggregator
from cypher_query_builder.query_builder.interfaces import Renderable


class ClauseComposer:
    """Render clause content objects in order, continuing past failures.

    A failed object contributes an empty string and its error is recorded in
    the aggregator. Every object is always attempted.
    """

    def __init__(self, aggregator: ErrorAggregator) -> None:
        self._aggregator = aggregator

    def render_one(self, item: Renderable, clause: str, index: int = 0) -> str:
        """Render a single object.

        Args:
            item: Object to render
            clause: Keyword of the clause being assembled
            index: Position of the object within the clause

        Returns:
            The rendered text, or an empty string on failure
        """
        try:
            return item.render()
        except ApplicationError as e:
            self._aggregator.record(e, clause=clause)
        except Exception as e:
            error = RenderError(
                str(e),
                details=ClauseErrorDetails(
                    source=type(item).__name__,
                    operation="render",
                    clause=clause,
                    item_index=index,
                    item_type=type(item).__name__,
                ),
            )
            error.__cause__ = e
            self._aggregator.record(error, clause=clause)
        return ""

    def compose(self, items: tuple[Renderable, ...] | list[Renderable], clause: str) -> list[str]:
        """Render every object, keeping one entry per object."""
        return [self.render_one(item, clause, index) for index, item in enumerate(items)]

    def concat(self, items: tuple[Renderable, ...] | list[Renderable], clause: str) -> str:
        """Render every object and concatenate the results with no separator."""
        return "".join(self.compose(items, clause))
