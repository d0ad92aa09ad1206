from .base import ApplicationError, ClauseErrorDetails, ErrorCode, ErrorDetails, ErrorLevel
from .errors import (
    BuilderFinalizedError,
    CompositeQueryError,
    EmptyClauseError,
    EmptyPatternError,
    InvalidArgumentError,
    RenderError,
)
