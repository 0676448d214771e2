"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── posts (Post[])          - Posts authored by this user
       └── follows (Follow edges)  - following / followers, see follow.py

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ first_name       │ "Ada"                                                     │
│ last_name        │ "Lovelace"                                                │
│ username         │ "adalovelace"                                             │
│ email            │ "ada@example.com"                                         │
│ password_hash    │ "$2b$12$..."                                              │
│ avatar           │ NULL                                                      │
│ coins            │ 50                                                        │
│ balance          │ 0.00                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Integer, Numeric, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialfeed.config.settings import settings
from socialfeed.shared.models.base import Base, TimestampMixin


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from socialfeed.shared.models.post import Post


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        first_name / last_name: Display name parts
        username: Unique handle derived from the name at signup
        email: Login email, stored lower-cased (unique)
        password_hash: Bcrypt hashed password
        avatar: Optional avatar URL
        coins: In-app coin balance
        balance: Monetary balance

    Relationships:
        posts: All posts by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)

    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    username: Mapped[str] = mapped_column(
        String(150),
        unique=True,
        nullable=False,
        index=True,
    )

    avatar: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    # Always lower-cased before insert and lookup
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # WALLET
    # ═══════════════════════════════════════════════════════════════════════════

    coins: Mapped[int] = mapped_column(
        Integer,
        default=lambda: settings.DEFAULT_COINS,
        server_default=text("50"),
        nullable=False,
    )

    balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        default=Decimal("0"),
        server_default=text("0"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="author",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
