"""
Membership Repository (Toggle Engine)

Generic repository for set-membership tables such as post likes and
follow edges. A membership row exists or it does not; the row's composite
primary key is the member identity.

Toggle Algorithm:
=================
┌─────────────────────────────────────────────────────────────────────────────┐
│                              toggle(**key)                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   1. DELETE FROM t WHERE key                     rowcount = 1 → REMOVED     │
│                          │ rowcount = 0                                     │
│                          ▼                                                  │
│   2. INSERT INTO t (key) ON CONFLICT DO NOTHING  rowcount = 1 → ADDED       │
│                          │ rowcount = 0                                     │
│                          ▼                                                  │
│   3. A concurrent request inserted the row between 1 and 2 → back to 1      │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Each step is one conditional statement executed by the database, never a
read followed by a write, so:
- every request applies exactly one transition (added or removed)
- two racing requests for the same key serialize on the primary key index
- the final state is the parity of the number of requests

Usage:
======
    class PostLikeRepository(MembershipRepository[PostLike]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(PostLike, session, key_columns=("post_id", "user_id"))

    outcome = await repo.toggle(post_id=post.id, user_id=user.id)
"""

from typing import Any, Generic, Sequence, Type

from sqlalchemy import Insert, delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from socialfeed.config.settings import settings
from socialfeed.shared.core.exceptions import InternalError
from socialfeed.shared.core.logging import get_logger
from socialfeed.shared.models.enums import ToggleOutcome
from socialfeed.shared.repositories.base import ModelType


logger = get_logger("membership")


class MembershipRepository(Generic[ModelType]):
    """
    Base repository for membership tables keyed by a composite primary key.

    Attributes:
        model: Membership model class
        session: Async database session
        key_columns: Names of the columns forming the membership key
        max_attempts: Bound on retries when racing a concurrent insert
    """

    def __init__(
        self,
        model: Type[ModelType],
        session: AsyncSession,
        key_columns: Sequence[str],
    ) -> None:
        self.model = model
        self.session = session
        self.key_columns = tuple(key_columns)
        self.max_attempts = settings.TOGGLE_MAX_ATTEMPTS

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    def _conditions(self, key: dict[str, Any]) -> list[Any]:
        if set(key) != set(self.key_columns):
            raise ValueError(f"Membership key must be exactly {self.key_columns}, got {tuple(key)}")
        return [getattr(self.model, column) == value for column, value in key.items()]

    def _insert(self) -> Insert:
        """Dialect insert construct supporting ON CONFLICT DO NOTHING."""
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            return pg_insert(self.model)
        if dialect == "sqlite":
            return sqlite_insert(self.model)
        raise InternalError(f"Membership toggles are not supported on '{dialect}'")

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def contains(self, **key: Any) -> bool:
        """Check whether the membership row exists."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(*self._conditions(key))
        )
        return (result.scalar() or 0) > 0

    async def count_where(self, **filters: Any) -> int:
        """
        Count membership rows matching column equality filters.

        Example:
            await repo.count_where(post_id=post.id)   # like count
        """
        query = select(sql_count()).select_from(self.model)
        for column, value in filters.items():
            query = query.where(getattr(self.model, column) == value)
        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CONDITIONAL WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def add(self, **key: Any) -> bool:
        """
        Insert the membership row unless it already exists.

        Returns:
            True if this call inserted the row
        """
        stmt = (
            self._insert()
            .values(**key)
            .on_conflict_do_nothing(index_elements=list(self.key_columns))
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def remove(self, **key: Any) -> bool:
        """
        Delete the membership row if it exists.

        Returns:
            True if this call deleted the row
        """
        stmt = (
            delete(self.model)
            .where(*self._conditions(key))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def toggle(self, **key: Any) -> ToggleOutcome:
        """
        Flip membership for the given key.

        Returns:
            ToggleOutcome.ADDED or ToggleOutcome.REMOVED

        Raises:
            InternalError: If concurrent requests kept winning the race
        """
        for attempt in range(1, self.max_attempts + 1):
            if await self.remove(**key):
                return ToggleOutcome.REMOVED
            if await self.add(**key):
                return ToggleOutcome.ADDED
            logger.info(
                "Toggle raced a concurrent insert, retrying",
                table=self.model.__tablename__,
                attempt=attempt,
            )

        raise InternalError("Could not apply toggle, please retry")
