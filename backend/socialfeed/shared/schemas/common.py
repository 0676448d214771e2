"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, camelCase aliases)
- Generic Responses: MessageResponse, ErrorResponse
- HealthResponse

JSON keys are camelCase while Python attributes stay snake_case:

    class FeedResponse(BaseSchema):
        current_page: int      # serialized as "currentPage"

Usage:
======
    from socialfeed.shared.schemas.common import BaseSchema, MessageResponse

    class LikeResponse(BaseSchema):
        liked: bool
        like_count: int
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from socialfeed.shared.models.base import utcnow


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - alias_generator: camelCase JSON keys
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseSchema):
    """Simple message response for success confirmations."""

    message: str


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error context, e.g. validation errors",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Post not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: datetime = Field(default_factory=utcnow)
