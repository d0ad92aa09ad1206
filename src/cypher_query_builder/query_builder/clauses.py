"""Clause content models.

Conditions, projection items and removal/ordering descriptions. Each renders
to the Cypher fragment placed after its clause keyword. Empty expressions are
accepted at construction and only fail when rendered, so they surface through
the builder's deferred error list like any other assembly problem.
"""

from typing import Literal

from pydantic import BaseModel, Field

from cypher_query_builder.core.errors import RenderError

BooleanOperator = Literal["AND", "OR", "XOR"]


class Condition(BaseModel):
    """One WHERE condition.

    Conditions are concatenated with no separator, so every condition after
    the first should carry the boolean operator that joins it to the previous one.
    """

    expression: str = Field(description="Boolean Cypher expression, e.g. n.age > 18")
    operator: BooleanOperator | None = Field(None, description="Operator joining this condition to the previous one")
    negate: bool = Field(False, description="Prefix the expression with NOT")

    def render(self) -> str:
        if not self.expression.strip():
            raise RenderError("error empty Where condition")
        expression = f"NOT {self.expression}" if self.negate else self.expression
        if self.operator:
            return f" {self.operator} {expression}"
        return expression


class ReturnItem(BaseModel):
    """One projected expression of a RETURN clause."""

    expression: str = Field(description="Projected Cypher expression")
    alias: str | None = Field(None, description="Optional name bound with AS")

    def render(self) -> str:
        if not self.expression.strip():
            raise RenderError(f"error empty {type(self).__name__} expression")
        if self.alias:
            return f"{self.expression} AS {self.alias}"
        return self.expression


class WithItem(ReturnItem):
    """One projected expression of a WITH clause."""


class RemoveTarget(BaseModel):
    """Targets of a DELETE or REMOVE clause (variables, properties or labels)."""

    items: list[str] = Field(default_factory=list, description="Variables, n.prop or n:Label items")

    @property
    def is_empty(self) -> bool:
        return not self.items

    def render(self) -> str:
        blank = [index for index, item in enumerate(self.items) if not item.strip()]
        if blank:
            raise RenderError(f"error blank remove target at position {blank[0]}")
        return ", ".join(self.items)


class OrderBy(BaseModel):
    """Sort expressions of an ORDER BY clause."""

    items: list[str] = Field(default_factory=list, description="Sort expressions")
    descending: bool = Field(False, description="Sort in descending order")

    @property
    def is_empty(self) -> bool:
        return not self.items

    def render(self) -> str:
        if any(not item.strip() for item in self.items):
            raise RenderError("error blank OrderBy expression")
        query = ", ".join(self.items)
        if self.descending:
            query += " DESC"
        return query
