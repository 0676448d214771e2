"""
Authentication Handler

Handles registration, login, the current-user profile and following.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

Business logic belongs in the SERVICE layer, not here.

HTTP STATUS MAPPING:
====================
Signup and login report duplicate emails and bad credentials as 400,
which the web client expects, instead of the exceptions' default 409/401.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from socialfeed.api.dependencies.auth import CurrentUser
from socialfeed.api.dependencies.services import get_auth_service, get_user_service
from socialfeed.shared.core.exceptions import AuthenticationError, ConflictError
from socialfeed.shared.schemas.user import (
    AuthResponse,
    FollowResponse,
    LoginRequest,
    MeResponse,
    ProfileResponse,
    SignupRequest,
    UserResponse,
)
from socialfeed.shared.services.auth_service import AuthService
from socialfeed.shared.services.user_service import UserService


router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    user_data: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Creates a new user account and returns a session token.

    Raises:
        400: If a field is missing or the email is already registered
    """
    try:
        user, token = await auth_service.register_user(
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email,
            password=user_data.password,
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return a session token.

    Raises:
        400: If credentials are missing or invalid
    """
    try:
        user, token = await auth_service.login_user(
            email=credentials.email,
            password=credentials.password,
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
async def get_me(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get the authenticated user with follower / following counts.

    Raises:
        401: If the session token is missing or invalid
    """
    counts = await user_service.get_follow_counts(current_user.id)
    account = UserResponse.model_validate(current_user)

    return MeResponse(
        user=ProfileResponse(
            **account.model_dump(),
            followers=counts.followers,
            following=counts.following,
        ),
    )


@router.put("/follow/{user_id}", response_model=FollowResponse)
async def toggle_follow(
    user_id: UUID,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Follow a user, or unfollow if already following.

    Raises:
        400: Following yourself
        404: User not found
    """
    following = await user_service.toggle_follow(current_user, user_id)

    return FollowResponse(
        message="Followed successfully" if following else "Unfollowed successfully",
        following=following,
    )
