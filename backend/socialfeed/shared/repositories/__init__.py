"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]              ← Generic CRUD operations
         │
         ├── UserRepository                ← Email lookup, username prefixes
         ├── PostRepository                ← Feed pages, search, eager loads
         └── CommentRepository             ← Append-only comment sequence

    MembershipRepository[ModelType]        ← Atomic set-membership toggle
         │
         ├── FollowRepository              ← follower → followee edges
         └── PostLikeRepository            ← post like-sets

Usage Example:
==============
    from socialfeed.shared.repositories import PostRepository, PostLikeRepository

    async def like(db: AsyncSession, post_id: UUID, user_id: UUID):
        outcome = await PostLikeRepository(db).toggle_like(post_id, user_id)
        count = await PostLikeRepository(db).count_for_post(post_id)
"""

from socialfeed.shared.repositories.base import BaseRepository
from socialfeed.shared.repositories.membership import MembershipRepository
from socialfeed.shared.repositories.user_repository import UserRepository
from socialfeed.shared.repositories.follow_repository import FollowRepository
from socialfeed.shared.repositories.post_repository import PostRepository
from socialfeed.shared.repositories.post_like_repository import PostLikeRepository
from socialfeed.shared.repositories.comment_repository import CommentRepository

__all__ = [
    # Base classes
    "BaseRepository",
    "MembershipRepository",
    # Entity-specific repositories
    "UserRepository",
    "FollowRepository",
    "PostRepository",
    "PostLikeRepository",
    "CommentRepository",
]
