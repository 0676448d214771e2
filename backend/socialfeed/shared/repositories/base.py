"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- count()        → Count records
- create()       → Create new record
- delete()       → Hard delete record (ORM cascades apply)

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(id)  # Returns User, not Any!

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
- commit(): Called by get_db() after the request handler completes

Repository methods only flush, so every statement issued while serving a
request belongs to one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from socialfeed.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Post)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM posts WHERE id = '770e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        """
        Count all records without loading them.

        Returns:
            Number of rows in the table

        SQL Generated:
            SELECT COUNT(*) FROM posts
        """
        result = await self.session.execute(select(sql_count()).select_from(self.model))
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Creates a new instance of the model, adds it to the session,
        and flushes to get the generated ID and defaults.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            sqlalchemy.exc.IntegrityError: If a unique constraint is violated
        """
        instance = self.model(**kwargs)

        # Marks as pending insert
        self.session.add(instance)

        # Send INSERT to get DB-generated values (id, defaults)
        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, instance: ModelType) -> None:
        """
        Hard delete an already loaded record.

        ORM cascades configured on the model (e.g. a post's likes and
        comments) are loaded and deleted in the same flush.

        Args:
            instance: The model instance to delete

        SQL Generated:
            DELETE FROM comments WHERE id = ...
            DELETE FROM posts WHERE id = '...'
        """
        await self.session.delete(instance)
        await self.session.flush()
