"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, message/error/health responses
- user: Authentication, profile and follow schemas
- post: Post, comment, like and feed schemas

Usage:
======
    from socialfeed.shared.schemas.user import SignupRequest, AuthResponse
    from socialfeed.shared.schemas.post import FeedResponse, PostResponse
"""

from socialfeed.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from socialfeed.shared.schemas.user import (
    SignupRequest,
    LoginRequest,
    UserSummary,
    UserResponse,
    ProfileResponse,
    AuthResponse,
    MeResponse,
    FollowResponse,
)
from socialfeed.shared.schemas.post import (
    CommentCreate,
    CommentResponse,
    CommentCreatedResponse,
    CommentListResponse,
    PostResponse,
    PostCreatedResponse,
    FeedResponse,
    SearchResponse,
    LikeResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "SignupRequest",
    "LoginRequest",
    "UserSummary",
    "UserResponse",
    "ProfileResponse",
    "AuthResponse",
    "MeResponse",
    "FollowResponse",
    # Post
    "CommentCreate",
    "CommentResponse",
    "CommentCreatedResponse",
    "CommentListResponse",
    "PostResponse",
    "PostCreatedResponse",
    "FeedResponse",
    "SearchResponse",
    "LikeResponse",
]
