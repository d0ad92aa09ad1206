"""Centralized logging setup with optional Logfire integration.

The library itself never configures logging on import; host applications
call ``setup_logging`` once at startup if they want the builder's structured
events rendered.
"""

import logging
import sys

import logfire
import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import FilteringBoundLogger

from cypher_query_builder.core.config import Settings, get_settings


def add_error_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add the error type and code of an ``error`` field to log events.

    Args:
        logger: The wrapped logger instance
        method_name: The name of the logging method
        event_dict: The event dictionary

    Returns:
        The event dictionary with added context
    """
    if "error" in event_dict:
        error = event_dict["error"]
        event_dict["error_type"] = type(error).__name__
        code = getattr(error, "code", None)
        if code is not None:
            event_dict["error_code"] = code.value

    return event_dict


def build_processors(config: Settings) -> list[Processor]:
    """Build the structlog processor chain for the given settings.

    Args:
        config: Logging settings

    Returns:
        Processors ending with the final renderer
    """
    processors: list[Processor] = [
        # Merge context from contextvars
        structlog.contextvars.merge_contextvars,
        # Add log level to event dict
        structlog.processors.add_log_level,
        # Add timestamp in ISO format
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        # Add callsite parameters (file, line, function)
        CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.FILENAME,
                CallsiteParameter.LINENO,
                CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_error_context,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    # Logfire processor MUST come before the final renderer
    if config.logfire_enabled:
        processors.append(logfire.StructlogProcessor())

    if config.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=config.log_colors))

    return processors


def setup_logging(config: Settings | None = None) -> None:
    """Set up application-wide logging with structlog.

    Logfire itself is configured via its own environment variables
    (LOGFIRE_TOKEN, LOGFIRE_SERVICE_NAME, ...); this function only wires its
    structlog processor in when ``logfire_enabled`` is set.

    Args:
        config: Settings to use, defaults to settings loaded from the environment
    """
    config = config or get_settings()
    level = logging.getLevelName(config.log_level)

    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Use PrintLogger to avoid double logging with standard library
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logs go through the same renderer
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger instance.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        A configured structlog logger instance
    """
    return structlog.get_logger(name)
