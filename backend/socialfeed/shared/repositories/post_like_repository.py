"""
PostLike Repository

Post like-sets, toggled through MembershipRepository.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.models.post_like import PostLike
from socialfeed.shared.models.enums import ToggleOutcome
from socialfeed.shared.repositories.membership import MembershipRepository


class PostLikeRepository(MembershipRepository[PostLike]):
    """Repository for (post, user) like rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(PostLike, session, key_columns=("post_id", "user_id"))

    async def toggle_like(self, post_id: UUID, user_id: UUID) -> ToggleOutcome:
        """Like if not liked, unlike otherwise."""
        return await self.toggle(post_id=post_id, user_id=user_id)

    async def count_for_post(self, post_id: UUID) -> int:
        """
        Authoritative like count: the size of the post's like-set.

        SQL Generated:
            SELECT COUNT(*) FROM post_likes WHERE post_id = '...'
        """
        return await self.count_where(post_id=post_id)
