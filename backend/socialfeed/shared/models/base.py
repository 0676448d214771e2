"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← created_at/updated_at set at construction

Usage:
======
    from socialfeed.shared.models.base import Base, TimestampMixin

    class Post(Base, TimestampMixin):
        __tablename__ = "posts"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

Identifiers use the generic ``Uuid`` type: native UUID on PostgreSQL,
CHAR(32) on SQLite.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time used for model defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or through TimestampMixin.
    """


class TimestampMixin:
    """
    Mixin that adds timestamp tracking to models.

    - created_at: Set when the object is constructed and inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    Values come from the application clock (``default=utcnow``) so feed
    ordering by created_at has sub-second resolution on every backend.
    The server_default only covers rows inserted outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
