"""Specific error types for the query builder."""

from collections.abc import Sequence

from .base import ApplicationError, ClauseErrorDetails, ErrorCode, ErrorLevel


class EmptyClauseError(ApplicationError):
    """A clause received no items, or an empty description."""

    def __init__(self, message: str, details: ClauseErrorDetails | dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.EMPTY_CLAUSE,
            level=ErrorLevel.WARNING,
            details=details,
        )


class EmptyPatternError(ApplicationError):
    """A pattern description has none of its variants populated."""

    def __init__(self, message: str, details: ClauseErrorDetails | dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.EMPTY_PATTERN,
            level=ErrorLevel.WARNING,
            details=details,
        )


class InvalidArgumentError(ApplicationError):
    """A clause argument is outside its accepted range."""

    def __init__(self, message: str, details: ClauseErrorDetails | dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            level=ErrorLevel.WARNING,
            details=details,
        )


class RenderError(ApplicationError):
    """A clause content object failed to render to text."""

    def __init__(self, message: str, details: ClauseErrorDetails | dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.RENDER_FAILED,
            level=ErrorLevel.ERROR,
            details=details,
        )


class BuilderFinalizedError(ApplicationError):
    """A clause method was called on a builder that has already been executed."""

    def __init__(self, message: str, details: ClauseErrorDetails | dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.BUILDER_FINALIZED,
            level=ErrorLevel.ERROR,
            details=details,
        )


class CompositeQueryError(ApplicationError):
    """Every error recorded while assembling one query, in recording order."""

    PREFIX = "errors found: "
    SEPARATOR = ";"

    def __init__(self, errors: Sequence[Exception]):
        self.errors: tuple[Exception, ...] = tuple(errors)
        message = (
            self.PREFIX
            + self.SEPARATOR.join(str(error) for error in self.errors)
            + f" -- total errors ({len(self.errors)})"
        )
        super().__init__(
            message=message,
            code=ErrorCode.COMPOSITE,
            level=ErrorLevel.ERROR,
            details={"source": "query_builder", "operation": "execute"},
        )

    def __len__(self) -> int:
        return len(self.errors)
