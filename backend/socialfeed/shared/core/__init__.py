"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from socialfeed.shared.core.logging import logger, get_logger
    from socialfeed.shared.core.exceptions import SocialFeedException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from socialfeed.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from socialfeed.shared.core.exceptions import (
    SocialFeedException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    InternalError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "SocialFeedException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "InternalError",
]
