"""
Follow Edge Model

One row per (follower, followee) pair.

The same row answers both sides of the relationship:
    follower_id = A, followee_id = B
        → B ∈ A.following
        → A ∈ B.followers

so the mirrored following/followers pair can never be half-written.

SAMPLE FOLLOW RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ follower_id      │ 550e8400-e29b-41d4-a716-446655440000                      │
│ followee_id      │ 660e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
import uuid

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from socialfeed.shared.models.base import Base, utcnow


class Follow(Base):
    """
    Follow edge between two users.

    Composite primary key prevents duplicate edges, which is what makes
    the follow toggle safe under concurrent requests.
    """

    __tablename__ = "follows"

    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    followee_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("follower_id <> followee_id", name="ck_follows_no_self_follow"),
        # Follower lists are looked up by followee
        Index("ix_follows_followee_id", "followee_id"),
    )

    def __repr__(self) -> str:
        return f"<Follow(follower_id={self.follower_id}, followee_id={self.followee_id})>"
