"""Query builder interfaces.

This module defines the capability contract every piece of clause content
must satisfy to be usable by the builder.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Protocol for clause content objects (patterns, conditions, return items).

    The builder never inspects these objects, it only reads their rendered
    text. A failed render is signalled by raising; the exception's string
    form is used as the failure description.
    """

    def render(self) -> str:
        """Render this object to Cypher text.

        Returns:
            The Cypher fragment for this object

        Raises:
            Exception: If the object cannot be rendered
        """
        ...


@runtime_checkable
class ClauseDescription(Renderable, Protocol):
    """Renderable whose emptiness is stated explicitly rather than inferred."""

    @property
    def is_empty(self) -> bool:
        """True when the description carries nothing to emit."""
        ...
