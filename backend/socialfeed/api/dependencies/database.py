"""
Database Dependency

FastAPI dependency for database sessions.

This module provides the get_db dependency that yields async database sessions
to route handlers. The session is automatically committed on success and
rolled back on error.

Tests override this dependency to point the app at a throwaway database:

    app.dependency_overrides[get_db] = override_get_db

Usage:
======
    from socialfeed.api.dependencies.database import DbSession

    @router.get("/posts/{post_id}")
    async def get_post(post_id: UUID, db: DbSession):
        return await PostRepository(db).get(post_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields an async database session for the duration of the request.
    The session is automatically:
    - Committed on success
    - Rolled back on exception
    - Closed after the request

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
