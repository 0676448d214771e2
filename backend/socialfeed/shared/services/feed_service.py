"""
Feed Service

Business logic for reading the feed: filtered pages, search and likes.

Feed Pages:
===========
    page=1, limit=20, 45 posts total
        → posts 1-20, currentPage=1, totalPages=3, totalPosts=45

Usage:
======
    from socialfeed.shared.services.feed_service import FeedService

    service = FeedService(db)
    page = await service.list_posts("most-liked", page=1, limit=20)
    liked, like_count = await service.toggle_like(post_id, user)
"""

from dataclasses import dataclass
import math
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.config.settings import settings
from socialfeed.shared.core.exceptions import PostNotFoundError, ValidationError
from socialfeed.shared.core.logging import logger
from socialfeed.shared.models.enums import FeedFilter, ToggleOutcome
from socialfeed.shared.models.post import Post
from socialfeed.shared.models.user import User
from socialfeed.shared.repositories.post_like_repository import PostLikeRepository
from socialfeed.shared.repositories.post_repository import PostRepository


@dataclass
class FeedPage:
    """One page of the feed."""

    posts: List[Post]
    current_page: int
    total_pages: int
    total_posts: int


class FeedService:
    """
    Service for feed-related business logic.

    Handles:
    - Paginated feed under each sort filter
    - Text search over posts
    - Like toggling with authoritative like counts
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize FeedService.

        Args:
            session: Async database session
        """
        self.session = session
        self.post_repo = PostRepository(session)
        self.like_repo = PostLikeRepository(session)

    async def list_posts(
        self,
        feed_filter: Optional[str] = None,
        page: int = 1,
        limit: Optional[int] = None,
        viewer: Optional[User] = None,
    ) -> FeedPage:
        """
        Get one page of the feed.

        The feed is public; a signed-in viewer only shows up in the logs.

        Args:
            feed_filter: Raw filter value, unknown values mean newest first
            page: 1-indexed page number
            limit: Page size (defaults to FEED_PAGE_SIZE)
            viewer: Signed-in user, if any

        Returns:
            FeedPage with posts and pagination totals
        """
        sort = FeedFilter.parse(feed_filter)
        page = max(page, 1)
        limit = min(max(limit or settings.FEED_PAGE_SIZE, 1), settings.FEED_MAX_PAGE_SIZE)

        posts = await self.post_repo.list_feed(
            sort,
            offset=(page - 1) * limit,
            limit=limit,
        )
        total = await self.post_repo.count()

        logger.debug(
            "Feed page served",
            filter=sort.value,
            page=page,
            limit=limit,
            viewer_id=str(viewer.id) if viewer else None,
        )

        return FeedPage(
            posts=posts,
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_posts=total,
        )

    async def search_posts(self, query: Optional[str]) -> List[Post]:
        """
        Case-insensitive substring search over post text, newest first.

        Raises:
            ValidationError: If the query is empty
        """
        term = (query or "").strip()
        if not term:
            raise ValidationError("Search query required")

        return await self.post_repo.search(term, limit=settings.SEARCH_RESULT_LIMIT)

    async def toggle_like(self, post_id: UUID, user: User) -> Tuple[bool, int]:
        """
        Like the post if the user hasn't, unlike it otherwise.

        Args:
            post_id: Post to like or unlike
            user: Authenticated user

        Returns:
            Tuple of (liked, like_count) where like_count is counted from
            the like-set after the toggle

        Raises:
            PostNotFoundError: If post doesn't exist
        """
        post = await self.post_repo.get(post_id)
        if post is None:
            raise PostNotFoundError()

        outcome = await self.like_repo.toggle_like(post.id, user.id)
        liked = outcome is ToggleOutcome.ADDED
        like_count = await self.like_repo.count_for_post(post.id)

        logger.info(
            "Like toggled",
            post_id=str(post.id),
            user_id=str(user.id),
            liked=liked,
            like_count=like_count,
        )
        return liked, like_count
