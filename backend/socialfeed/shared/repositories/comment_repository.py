"""
Comment Repository

Append and read comments of a post. Comments are always returned in
insertion order (ascending id).
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.functions import count as sql_count

from socialfeed.shared.models.comment import Comment
from socialfeed.shared.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def get_with_author(self, comment_id: int) -> Optional[Comment]:
        """Load a comment together with its author summary."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == comment_id)
            .options(selectinload(Comment.author))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_for_post(self, post_id: UUID) -> list[Comment]:
        """
        All comments of a post with their authors, oldest first.

        SQL Generated:
            SELECT * FROM comments WHERE post_id = '...' ORDER BY id ASC
        """
        result = await self.session.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .options(selectinload(Comment.author))
            .order_by(Comment.id.asc())
        )
        return list(result.scalars().all())

    async def count_for_post(self, post_id: UUID) -> int:
        result = await self.session.execute(
            select(sql_count()).select_from(Comment).where(Comment.post_id == post_id)
        )
        return result.scalar() or 0
