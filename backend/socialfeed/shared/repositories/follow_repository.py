"""
Follow Repository

Follow edges between users, toggled through MembershipRepository.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.models.follow import Follow
from socialfeed.shared.models.enums import ToggleOutcome
from socialfeed.shared.repositories.membership import MembershipRepository


class FollowRepository(MembershipRepository[Follow]):
    """Repository for follower → followee edges."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Follow, session, key_columns=("follower_id", "followee_id"))

    async def toggle_follow(self, follower_id: UUID, followee_id: UUID) -> ToggleOutcome:
        """Follow if not following, unfollow otherwise."""
        return await self.toggle(follower_id=follower_id, followee_id=followee_id)

    async def count_followers(self, user_id: UUID) -> int:
        """Number of users following ``user_id``."""
        return await self.count_where(followee_id=user_id)

    async def count_following(self, user_id: UUID) -> int:
        """Number of users ``user_id`` follows."""
        return await self.count_where(follower_id=user_id)
