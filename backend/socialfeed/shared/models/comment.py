"""
Comment Entity Model

A comment belonging to exactly one post.

Comments are append-only: they are never edited or deleted individually
and disappear only together with their post. The integer primary key is
the insertion sequence, so ``ORDER BY id`` is the original order.

SAMPLE COMMENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ post_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ text             │ "Love this!"                                              │
│ created_at       │ 2024-01-15T10:32:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialfeed.shared.models.base import Base, utcnow


if TYPE_CHECKING:
    from socialfeed.shared.models.post import Post
    from socialfeed.shared.models.user import User


class Comment(Base):
    """
    Comment model.

    Attributes:
        id: Insertion sequence number
        post_id: The post commented on
        user_id: The comment author
        text: Trimmed, non-empty comment body
        created_at: When the comment was added

    Relationships:
        post: Parent post
        author: Commenting user
    """

    __tablename__ = "comments"

    # SQLite only auto-increments INTEGER PRIMARY KEY columns
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="comments",
    )

    author: Mapped["User"] = relationship("User")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, post_id={self.post_id})>"
