"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_bearer_token()        ← Extract raw token from Authorization header
           │
           ▼
    get_current_user()        ← Resolve token to a User (401 on failure)
    get_optional_user()       ← Same, but None when no token is sent

Type Aliases:
=============
    CurrentUser   - Authenticated User model
    OptionalUser  - User model or None

Usage:
======
    from socialfeed.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from socialfeed.api.dependencies.services import get_auth_service
from socialfeed.shared.models.user import User
from socialfeed.shared.services.auth_service import AuthService


# Security scheme for Bearer tokens; missing headers are reported by
# get_current_user so the error body matches every other 401
security = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[str]:
    """
    Extract the bearer token from the Authorization header.

    Returns:
        Raw token string, or None when no bearer header was sent
    """
    return credentials.credentials if credentials else None


async def get_current_user(
    token: Annotated[Optional[str], Depends(get_bearer_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """
    Get current authenticated user from the session token.

    Raises:
        AuthenticationError: If token is missing or invalid, or the user
            no longer exists
    """
    return await auth_service.resolve_session(token)


async def get_optional_user(
    token: Annotated[Optional[str], Depends(get_bearer_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Optional[User]:
    """
    Get the current user if a token was sent.

    A token that is sent but invalid is still rejected.
    """
    if token is None:
        return None
    return await auth_service.resolve_session(token)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[User, Depends(get_current_user)]

# Authentication optional (public endpoints)
OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
