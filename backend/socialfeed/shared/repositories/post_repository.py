"""
Post Repository

Database operations specific to the Post model, including the feed
queries used by FeedService.

Feed Ordering:
==============
    filter            ORDER BY
    ───────────────   ──────────────────────────────────────────────
    default           created_at DESC, id DESC
    most-liked        like_count DESC, created_at DESC, id DESC
    most-commented    comment_count DESC, created_at DESC, id DESC
    most-shared       shares DESC, created_at DESC, id DESC

like_count and comment_count are correlated COUNT(*) subqueries over
post_likes and comments, so the sort always reflects the current sets.
The trailing id makes the order total, which keeps pages stable.

Eager Loading:
==============
Feed responses fan out author, liker and commenter summaries. These are
loaded with selectinload (one extra query per relationship for the whole
page) because async sessions cannot lazy load.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from socialfeed.shared.models.comment import Comment
from socialfeed.shared.models.enums import FeedFilter
from socialfeed.shared.models.post import Post
from socialfeed.shared.models.post_like import PostLike
from socialfeed.shared.repositories.base import BaseRepository


def like_count_expr() -> ColumnElement[int]:
    """Correlated like count for the enclosing Post row."""
    return (
        select(func.count(PostLike.user_id))
        .where(PostLike.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )


def comment_count_expr() -> ColumnElement[int]:
    """Correlated comment count for the enclosing Post row."""
    return (
        select(func.count(Comment.id))
        .where(Comment.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )


def escape_like(term: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        term.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class PostRepository(BaseRepository[Post]):
    """
    Repository for Post database operations.

    Provides:
    - Loading posts with every relationship a response needs
    - Feed pages under each FeedFilter ordering
    - Case-insensitive text search
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PostRepository.

        Args:
            session: Async database session
        """
        super().__init__(Post, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _with_relations(query: Select[Any]) -> Select[Any]:
        """Attach eager loads for author, likers and comment authors."""
        return query.options(
            selectinload(Post.author),
            selectinload(Post.likers),
            selectinload(Post.comments).selectinload(Comment.author),
        )

    @staticmethod
    def _ordering(feed_filter: FeedFilter) -> list[ColumnElement[Any]]:
        metrics: dict[FeedFilter, ColumnElement[Any]] = {
            FeedFilter.MOST_LIKED: like_count_expr(),
            FeedFilter.MOST_COMMENTED: comment_count_expr(),
            FeedFilter.MOST_SHARED: Post.shares,
        }
        ordering = [Post.created_at.desc(), Post.id.desc()]
        metric = metrics.get(feed_filter)
        if metric is not None:
            ordering.insert(0, metric.desc())
        return ordering

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_with_relations(self, post_id: UUID) -> Optional[Post]:
        """
        Get a post with author, likers and comments loaded.

        Existing identities are repopulated so a post created or changed
        earlier in the same session comes back complete.
        """
        query = self._with_relations(select(Post).where(Post.id == post_id))
        result = await self.session.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def list_feed(
        self,
        feed_filter: FeedFilter,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Post]:
        """
        Get one page of the feed.

        Args:
            feed_filter: Sort strategy
            offset: Number of posts to skip
            limit: Page size

        Returns:
            Posts with relationships loaded, in feed order

        SQL Generated (most-liked):
            SELECT posts.* FROM posts
            ORDER BY (SELECT count(post_likes.user_id) FROM post_likes
                      WHERE post_likes.post_id = posts.id) DESC,
                     posts.created_at DESC, posts.id DESC
            LIMIT 20 OFFSET 0
        """
        query = (
            self._with_relations(select(Post))
            .order_by(*self._ordering(feed_filter))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def search(self, term: str, limit: int = 50) -> list[Post]:
        """
        Case-insensitive substring search over post text, newest first.

        Args:
            term: Literal search text (wildcards are escaped)
            limit: Maximum number of results

        SQL Generated:
            SELECT * FROM posts WHERE lower(text) LIKE lower('%hello%') ESCAPE '\\'
            ORDER BY created_at DESC, id DESC LIMIT 50
        """
        pattern = f"%{escape_like(term)}%"
        query = (
            self._with_relations(select(Post))
            .where(Post.text.ilike(pattern, escape="\\"))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
