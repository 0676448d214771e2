"""
User Service

Business logic for the social graph: following users and profile counts.

Usage:
======
    from socialfeed.shared.services.user_service import UserService

    service = UserService(db)
    following = await service.toggle_follow(current_user, target_id)
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.core.exceptions import UserNotFoundError, ValidationError
from socialfeed.shared.core.logging import logger
from socialfeed.shared.models.enums import ToggleOutcome
from socialfeed.shared.models.user import User
from socialfeed.shared.repositories.follow_repository import FollowRepository
from socialfeed.shared.repositories.user_repository import UserRepository


@dataclass
class FollowCounts:
    """Follower / following totals for one user."""

    followers: int
    following: int


class UserService:
    """
    Service for user relationship logic.

    Handles:
    - Follow / unfollow toggling
    - Follower and following counts
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.follow_repo = FollowRepository(session)

    async def toggle_follow(self, actor: User, target_id: UUID) -> bool:
        """
        Follow the target if not already following, unfollow otherwise.

        Args:
            actor: Authenticated user
            target_id: User to follow or unfollow

        Returns:
            True if the actor now follows the target

        Raises:
            UserNotFoundError: If target does not exist
            ValidationError: If actor and target are the same user
        """
        target = await self.user_repo.get(target_id)
        if target is None:
            raise UserNotFoundError()

        if target.id == actor.id:
            raise ValidationError("You cannot follow yourself")

        outcome = await self.follow_repo.toggle_follow(actor.id, target.id)
        following = outcome is ToggleOutcome.ADDED

        logger.info(
            "Follow toggled",
            follower_id=str(actor.id),
            followee_id=str(target.id),
            following=following,
        )
        return following

    async def get_follow_counts(self, user_id: UUID) -> FollowCounts:
        """Count followers and followed users from the follow edges."""
        return FollowCounts(
            followers=await self.follow_repo.count_followers(user_id),
            following=await self.follow_repo.count_following(user_id),
        )
