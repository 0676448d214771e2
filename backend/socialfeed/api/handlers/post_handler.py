"""
Post Handler

Handles the feed, search, post creation/deletion, likes and comments.

Endpoints:
==========
    GET    /posts                      → Feed page (auth optional)
    GET    /posts/search?q=            → Search post text
    POST   /posts                      → Create post (multipart, optional image)
    PUT    /posts/{post_id}/like       → Toggle like
    POST   /posts/{post_id}/comment    → Add comment
    GET    /posts/{post_id}/comments   → List comments
    DELETE /posts/{post_id}            → Delete own post
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from socialfeed.api.dependencies.auth import CurrentUser, OptionalUser
from socialfeed.api.dependencies.services import get_feed_service, get_post_service
from socialfeed.config.settings import settings
from socialfeed.shared.schemas.common import ErrorResponse, MessageResponse
from socialfeed.shared.schemas.post import (
    CommentCreate,
    CommentCreatedResponse,
    CommentListResponse,
    CommentResponse,
    FeedResponse,
    LikeResponse,
    PostCreatedResponse,
    PostResponse,
    SearchResponse,
)
from socialfeed.shared.services.feed_service import FeedService
from socialfeed.shared.services.post_service import PostService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# FEED
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=FeedResponse)
async def list_posts(
    current_user: OptionalUser,
    feed_filter: Optional[str] = Query(
        None,
        alias="filter",
        description="default, most-liked, most-commented or most-shared",
    ),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.FEED_PAGE_SIZE,
        ge=1,
        le=settings.FEED_MAX_PAGE_SIZE,
        description="Posts per page",
    ),
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Get a page of the public feed.

    Unknown filter values fall back to newest first.
    """
    feed = await feed_service.list_posts(
        feed_filter=feed_filter,
        page=page,
        limit=limit,
        viewer=current_user,
    )

    return FeedResponse(
        posts=[PostResponse.model_validate(post) for post in feed.posts],
        current_page=feed.current_page,
        total_pages=feed.total_pages,
        total_posts=feed.total_posts,
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def search_posts(
    q: Optional[str] = Query(None, description="Text to search for"),
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Case-insensitive search over post text, newest first.

    Raises:
        400: If the query is empty
    """
    posts = await feed_service.search_posts(q)
    return SearchResponse(posts=[PostResponse.model_validate(post) for post in posts])


# ═══════════════════════════════════════════════════════════════════════════════
# POSTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "",
    response_model=PostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_post(
    current_user: CurrentUser,
    text: Optional[str] = Form(None),
    is_promotion: bool = Form(False, alias="isPromotion"),
    image: Optional[UploadFile] = File(None),
    post_service: PostService = Depends(get_post_service),
):
    """
    Create a post with text, an image, or both.

    Raises:
        400: No text and no image, or the image is not an accepted format
    """
    # Browsers send an empty file part when no image was picked
    if image is not None and not image.filename:
        image = None

    post = await post_service.create_post(
        author=current_user,
        text=text,
        image=image,
        is_promotion=is_promotion,
    )

    return PostCreatedResponse(
        message="Post created successfully",
        post=PostResponse.model_validate(post),
    )


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_post(
    post_id: UUID,
    current_user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
):
    """
    Delete a post owned by the current user.

    Raises:
        403: Not the owner
        404: Post not found
    """
    await post_service.delete_post(post_id, current_user)
    return MessageResponse(message="Post deleted successfully")


# ═══════════════════════════════════════════════════════════════════════════════
# LIKES & COMMENTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.put("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: UUID,
    current_user: CurrentUser,
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Like a post, or unlike it if already liked.

    Raises:
        404: Post not found
    """
    liked, like_count = await feed_service.toggle_like(post_id, current_user)

    return LikeResponse(
        message="Post liked" if liked else "Post unliked",
        liked=liked,
        like_count=like_count,
    )


@router.post(
    "/{post_id}/comment",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: UUID,
    body: CommentCreate,
    current_user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
):
    """
    Add a comment to a post.

    Raises:
        400: Empty comment
        404: Post not found
    """
    comment, comment_count = await post_service.add_comment(post_id, current_user, body.text)

    return CommentCreatedResponse(
        message="Comment added successfully",
        comment=CommentResponse.model_validate(comment),
        comment_count=comment_count,
    )


@router.get("/{post_id}/comments", response_model=CommentListResponse)
async def list_comments(
    post_id: UUID,
    post_service: PostService = Depends(get_post_service),
):
    """
    List all comments of a post in the order they were added.

    Raises:
        404: Post not found
    """
    comments = await post_service.list_comments(post_id)

    return CommentListResponse(
        comments=[CommentResponse.model_validate(comment) for comment in comments],
        comment_count=len(comments),
    )
