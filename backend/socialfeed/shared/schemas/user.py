"""
User Schemas

Request/response models for user, authentication and follow endpoints.

Request fields are optional at the schema level so a missing field is
reported with the service's message ("Please fill in all fields")
instead of a generic validation error.
"""

from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from pydantic import EmailStr, field_serializer, field_validator

from socialfeed.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseSchema):
    """Schema for user registration."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(BaseSchema):
    """Schema for user login."""

    email: Optional[str] = None
    password: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class UserSummary(BaseSchema):
    """
    Public profile summary embedded in posts, comments and like lists.

    Never carries email or password data.
    """

    id: UUID
    first_name: str
    last_name: str
    username: str
    avatar: Optional[str] = None


class UserResponse(UserSummary):
    """The authenticated user's own account."""

    email: str
    coins: int
    balance: Decimal

    @field_serializer("balance")
    def serialize_balance(self, balance: Decimal) -> float:
        return float(balance)


class ProfileResponse(UserResponse):
    """Own account plus follow counts."""

    followers: int
    following: int


class AuthResponse(BaseSchema):
    """Schema for signup / login response."""

    message: str
    token: str
    user: UserResponse


class MeResponse(BaseSchema):
    """Schema for the current user endpoint."""

    user: ProfileResponse


class FollowResponse(BaseSchema):
    """Result of a follow toggle."""

    message: str
    following: bool
