"""
Post Schemas

Request/response models for posts, comments, likes and the feed.

Responses fan out user summaries: each post carries its author ("user"),
the users who liked it ("likes") and its comments with their authors.
Counts are derived from those lists, never read from a stored counter.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, Field, model_validator

from socialfeed.shared.schemas.common import BaseSchema
from socialfeed.shared.schemas.user import UserSummary


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class CommentCreate(BaseSchema):
    """Request to add a comment."""

    text: Optional[str] = Field(None, description="Comment body")


# ═══════════════════════════════════════════════════════════════════════════════
# COMMENTS
# ═══════════════════════════════════════════════════════════════════════════════


class CommentResponse(BaseSchema):
    """A comment with its author summary."""

    id: int
    user: UserSummary = Field(validation_alias=AliasChoices("author", "user"))
    text: str
    created_at: datetime


class CommentCreatedResponse(BaseSchema):
    """Response after adding a comment."""

    message: str
    comment: CommentResponse
    comment_count: int


class CommentListResponse(BaseSchema):
    """All comments of a post in insertion order."""

    comments: List[CommentResponse]
    comment_count: int


# ═══════════════════════════════════════════════════════════════════════════════
# POSTS
# ═══════════════════════════════════════════════════════════════════════════════


class PostResponse(BaseSchema):
    """
    A post as shown in the feed.

    Built from a Post loaded with author, likers and comments:

        PostResponse.model_validate(post)
    """

    id: UUID
    user: UserSummary = Field(validation_alias=AliasChoices("author", "user"))
    text: str
    image: Optional[str] = None
    is_promotion: bool
    shares: int
    likes: List[UserSummary] = Field(
        default_factory=list,
        validation_alias=AliasChoices("likers", "likes"),
    )
    like_count: int = 0
    comments: List[CommentResponse] = Field(default_factory=list)
    comment_count: int = 0
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def count_relations(self) -> "PostResponse":
        self.like_count = len(self.likes)
        self.comment_count = len(self.comments)
        return self


class PostCreatedResponse(BaseSchema):
    """Response after creating a post."""

    message: str
    post: PostResponse


class FeedResponse(BaseSchema):
    """One page of the feed with pagination totals."""

    posts: List[PostResponse]
    current_page: int
    total_pages: int
    total_posts: int


class SearchResponse(BaseSchema):
    """Search results, newest first."""

    posts: List[PostResponse]


class LikeResponse(BaseSchema):
    """Result of a like toggle."""

    message: str
    liked: bool
    like_count: int
