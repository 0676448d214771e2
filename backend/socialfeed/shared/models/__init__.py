"""
SocialFeed SQLAlchemy Models

This package contains all database models for the application.

Model Hierarchy:
================
    User
       ├── posts (Post[])
       └── follows (Follow edges, both directions)

    Post
       ├── likes (PostLike[])
       └── comments (Comment[])

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered application user
- Follow: Follower → followee edge
- Post: Feed post with optional image
- PostLike: Like membership (post, user)
- Comment: Append-only comment on a post

Usage:
======
    from socialfeed.shared.models import User, Post, Comment
"""

from socialfeed.shared.models.base import Base, TimestampMixin
from socialfeed.shared.models.enums import FeedFilter, ToggleOutcome
from socialfeed.shared.models.user import User
from socialfeed.shared.models.follow import Follow
from socialfeed.shared.models.post import Post
from socialfeed.shared.models.post_like import PostLike
from socialfeed.shared.models.comment import Comment

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "FeedFilter",
    "ToggleOutcome",
    # Models
    "User",
    "Follow",
    "Post",
    "PostLike",
    "Comment",
]
