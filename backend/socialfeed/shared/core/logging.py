"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Like toggled                   post_id=550e8400-... liked=True service=socialfeed env=development

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Like toggled", "service": "socialfeed", "env": "production", "post_id": "550e8400-..."}

Usage:
======
    from socialfeed.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Post created", post_id=post_id, user_id=user_id)

    # Get named logger
    storage_logger = get_logger("storage")
    storage_logger.warning("Image delete failed", path=path)

    # Add context to all subsequent logs of the current request
    log_context(request_id=request_id, path=path)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from socialfeed.config.settings import settings


def add_service_info(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Stamp every event with the service name and environment.

    Feed, auth and storage logs from several deployments end up in the same
    aggregator; these two keys tell them apart. Values set explicitly on
    an event win.
    """
    event_dict.setdefault("service", settings.APP_NAME.lower())
    event_dict.setdefault("env", settings.APP_ENV)
    return event_dict


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    - Development: colored console output for readability
    - Everything else: JSON output for log aggregation

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_info,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # RequestContextMiddleware already logs one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # aiosqlite traces every cursor call at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.INFO)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in contextvars, so each request (task) sees only its own
    values. The request middleware binds request_id, method and path here.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Called at the end of request processing so context does not leak
    into the next request handled by the same worker.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("socialfeed")
