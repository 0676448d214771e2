"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    SocialFeedException (base, 500)
       │
       ├── AuthenticationError (401)    ← Bad credentials, bad or expired session
       ├── AuthorizationError (403)     ← Authenticated but not the owner
       ├── NotFoundError (404)          ← Post or user does not exist
       │      ├── UserNotFoundError
       │      └── PostNotFoundError
       ├── ValidationError (400)        ← Missing field, empty post, bad image
       ├── ConflictError (409)          ← Unique field already taken
       │      └── DuplicateResourceError
       └── InternalError (500)          ← Image storage failure, lost toggle race

Each subclass only declares its status code, error code and default
message; the constructor is shared.

Usage:
======
    from socialfeed.shared.core.exceptions import PostNotFoundError, ValidationError

    raise PostNotFoundError()
    # → 404 {"error": {"code": "NOT_FOUND", "message": "Post not found", "details": {}}}

    raise ValidationError("Image is too large", details={"max_bytes": 5242880})
"""

from typing import Any, Optional


class SocialFeedException(Exception):
    """
    Base exception for all SocialFeed application errors.

    Attributes:
        message: Human-readable error message, shown to the client
        status_code: HTTP status code
        error_code: Machine-readable error code
        details: Additional error context
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error envelope returned as the JSON response body."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(SocialFeedException):
    """
    Raised when:
    - Login credentials do not match
    - Session token is missing, malformed or expired
    - Session token refers to a user that no longer exists
    """

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class AuthorizationError(SocialFeedException):
    """Authenticated, but the resource belongs to someone else."""

    status_code = 403
    error_code = "AUTHORIZATION_ERROR"
    default_message = "Access denied"


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(SocialFeedException):
    status_code = 404
    error_code = "NOT_FOUND"
    default_message = "Resource not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class PostNotFoundError(NotFoundError):
    default_message = "Post not found"


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(SocialFeedException):
    """Input is missing or malformed."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class ConflictError(SocialFeedException):
    """
    A unique value is already taken.

    Raised directly when a concurrent insert wins the race for a unique
    column after the service's own check passed.
    """

    status_code = 409
    error_code = "CONFLICT"
    default_message = "Resource conflict"


class DuplicateResourceError(ConflictError):
    """The service found an existing row with the same unique value."""

    default_message = "Resource already exists"


# ═══════════════════════════════════════════════════════════════════════════════
# INTERNAL ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class InternalError(SocialFeedException):
    """Failure the client cannot fix, such as an image that could not be written."""
