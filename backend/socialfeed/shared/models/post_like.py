"""
PostLike Membership Model

Junction table between Users and Posts: one row means "user likes post".

SAMPLE POST_LIKE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ post_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2024-01-15T10:31:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialfeed.shared.models.base import Base, utcnow


if TYPE_CHECKING:
    from socialfeed.shared.models.post import Post


class PostLike(Base):
    """
    A single like on a post.

    The composite primary key (post_id, user_id) makes a user's like
    unique per post at the database level.
    """

    __tablename__ = "post_likes"

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="likes",
    )

    __table_args__ = (
        Index("ix_post_likes_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<PostLike(post_id={self.post_id}, user_id={self.user_id})>"
