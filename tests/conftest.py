import pytest

from cypher_query_builder import CypherQueryBuilder, NodePattern, RelationshipPattern


class FailingRenderable:
    """Clause content whose render always fails."""

    def __init__(self, message: str = "boom") -> None:
        self.message = message

    def render(self) -> str:
        raise ValueError(self.message)


class StaticRenderable:
    def __init__(self, text: str) -> None:
        self.text = text

    def render(self) -> str:
        return self.text


@pytest.fixture
def builder():
    return CypherQueryBuilder()


@pytest.fixture
def person():
    return NodePattern("a", ["Person"])


@pytest.fixture
def movie():
    return NodePattern("m", ["Movie"])


@pytest.fixture
def acted_in():
    return RelationshipPattern("r", ["ACTED_IN"])


@pytest.fixture
def failing():
    return FailingRenderable


@pytest.fixture
def static():
    return StaticRenderable
