"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_email()               → Find user by email address (case-insensitive)
- email_exists()               → Check if email is already registered
- usernames_with_prefix()      → Taken usernames sharing a generated base
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.repositories.base import BaseRepository
from socialfeed.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Emails are stored lower-cased, so lookups lower-case their input
    and compare exactly.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address in any letter case

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE email = 'ada@example.com'
        """
        result = await self.session.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """
        Check if email already exists.

        Used to validate uniqueness when registering.
        """
        user = await self.get_by_email(email)
        return user is not None

    async def usernames_with_prefix(self, prefix: str) -> set[str]:
        """
        Get every username starting with a prefix.

        The prefix is a generated base username (lower-case alphanumerics
        only), so it contains no LIKE wildcards.

        Args:
            prefix: Base username, e.g. "adasmith"

        Returns:
            Set of taken usernames such as {"adasmith", "adasmith1"}

        SQL Generated:
            SELECT username FROM users WHERE username LIKE 'adasmith%'
        """
        result = await self.session.execute(
            select(User.username).where(User.username.like(f"{prefix}%"))
        )
        return set(result.scalars().all())
