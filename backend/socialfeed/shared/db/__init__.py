"""
Database Module

This module provides database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Service → Repository
        ▼
    Repository (UserRepository, FollowRepository, PostRepository,
                PostLikeRepository, CommentRepository)
        │  SQL statements
        ▼
    PostgreSQL / SQLite

Usage in FastAPI:
=================
    from fastapi import Depends
    from socialfeed.shared.db import get_db
    from socialfeed.shared.repositories import PostRepository

    @app.get("/posts/{post_id}")
    async def get_post(post_id: UUID, db: AsyncSession = Depends(get_db)):
        return await PostRepository(db).get(post_id)
"""

from socialfeed.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
