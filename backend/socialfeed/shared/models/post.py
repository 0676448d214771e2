"""
Post Entity Model

A post in the public feed.

Model Hierarchy:
================
    Post
       ├── author (User)          - Owner, immutable after creation
       ├── likes (PostLike[])     - Like-set, one row per liking user
       ├── likers (User[])        - Read-only view of the like-set
       └── comments (Comment[])   - Append-only, insertion order

SAMPLE POST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ text             │ "hello"                                                   │
│ image            │ "/uploads/1705314600000-482913.png"                       │
│ is_promotion     │ false                                                     │
│ shares           │ 0                                                         │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Like and comment counts are never stored here. They are always counted
from post_likes / comments so they cannot drift from the sets themselves.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy import text as sql_text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialfeed.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from socialfeed.shared.models.user import User
    from socialfeed.shared.models.post_like import PostLike
    from socialfeed.shared.models.comment import Comment


class Post(Base, TimestampMixin):
    """
    Post model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owning user
        text: Post body, empty only when an image is attached
        image: Public path of the stored image, if any
        is_promotion: Whether the post is a promotion
        shares: Share counter

    Relationships:
        author: The user who created the post
        likes: PostLike rows (membership only)
        likers: Users who liked the post (view-only)
        comments: Comments in insertion order
    """

    __tablename__ = "posts"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    text: Mapped[str] = mapped_column(
        Text,
        default="",
        server_default=sql_text("''"),
        nullable=False,
    )

    image: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    is_promotion: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=sql_text("false"),
        nullable=False,
    )

    shares: Mapped[int] = mapped_column(
        Integer,
        default=0,
        server_default=sql_text("0"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    author: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
    )

    likes: Mapped[list["PostLike"]] = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    likers: Mapped[list["User"]] = relationship(
        "User",
        secondary="post_likes",
        order_by="PostLike.created_at",
        viewonly=True,
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Post(id={self.id}, user_id={self.user_id})>"
