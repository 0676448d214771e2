"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

FastAPI caches get_db within a request, so every service (and the
current-user lookup) of one request shares a single session.

Usage:
======
    from socialfeed.api.dependencies.services import get_feed_service

    @router.get("/posts")
    async def list_posts(
        feed_service: FeedService = Depends(get_feed_service)
    ):
        return await feed_service.list_posts()
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.api.dependencies.database import get_db
from socialfeed.shared.adapters.storage_adapter import StorageAdapter
from socialfeed.shared.services.auth_service import AuthService
from socialfeed.shared.services.feed_service import FeedService
from socialfeed.shared.services.post_service import PostService
from socialfeed.shared.services.user_service import UserService


@lru_cache
def get_storage_adapter() -> StorageAdapter:
    """
    Dependency to get the StorageAdapter.

    The adapter only holds configuration, so one instance is shared.
    """
    return StorageAdapter()


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db)


async def get_post_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageAdapter = Depends(get_storage_adapter),
) -> PostService:
    """
    Dependency to get PostService instance.
    """
    return PostService(db, storage)


async def get_feed_service(
    db: AsyncSession = Depends(get_db),
) -> FeedService:
    """
    Dependency to get FeedService instance.
    """
    return FeedService(db)
