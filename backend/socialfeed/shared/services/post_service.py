"""
Post Service

Business logic for creating and deleting posts and for comments.

Post Lifecycle:
===============
    upload image (optional) → create post → likes / comments → delete

    - An uploaded image is stored before the post row is written. If the
      row cannot be written, the stored image is removed again.
    - Deleting a post removes the row (likes and comments cascade),
      commits, and only then removes the image. If the commit fails the
      image stays with its post. A failed image delete only logs a
      warning, since an orphaned file is harmless.

Usage:
======
    from socialfeed.shared.services.post_service import PostService

    service = PostService(db, StorageAdapter())
    post = await service.create_post(author=user, text="hello")
    comment, count = await service.add_comment(post.id, user, "Nice!")
"""

from typing import Optional, Tuple
from uuid import UUID

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.adapters.storage_adapter import StorageAdapter
from socialfeed.shared.core.exceptions import (
    AuthorizationError,
    PostNotFoundError,
    ValidationError,
)
from socialfeed.shared.core.logging import logger
from socialfeed.shared.models.comment import Comment
from socialfeed.shared.models.post import Post
from socialfeed.shared.models.user import User
from socialfeed.shared.repositories.comment_repository import CommentRepository
from socialfeed.shared.repositories.post_repository import PostRepository


class PostService:
    """
    Service for post and comment business logic.

    Handles:
    - Post creation with optional image
    - Owner-only post deletion
    - Appending and listing comments

    Attributes:
        session: Database session
        storage: Image storage adapter
    """

    def __init__(self, session: AsyncSession, storage: StorageAdapter) -> None:
        """
        Initialize PostService.

        Args:
            session: Async database session
            storage: Adapter used for post images
        """
        self.session = session
        self.storage = storage
        self.post_repo = PostRepository(session)
        self.comment_repo = CommentRepository(session)

    async def _get_post_or_raise(self, post_id: UUID) -> Post:
        post = await self.post_repo.get(post_id)
        if post is None:
            raise PostNotFoundError()
        return post

    # ═══════════════════════════════════════════════════════════════════════════
    # POSTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_post(
        self,
        author: User,
        text: Optional[str] = None,
        image: Optional[UploadFile] = None,
        is_promotion: bool = False,
    ) -> Post:
        """
        Create a post, storing its image first when one is attached.

        Args:
            author: Authenticated user creating the post
            text: Post body (may be empty when an image is attached)
            image: Uploaded image file
            is_promotion: Whether the post is a promotion

        Returns:
            The new post with author, likers and comments loaded

        Raises:
            ValidationError: No text and no image, or an invalid image
            InternalError: The image could not be stored
        """
        text = text or ""
        if not text.strip() and image is None:
            raise ValidationError("Post must have text or image")

        image_path = await self.storage.save_image(image) if image is not None else None

        try:
            post = await self.post_repo.create(
                user_id=author.id,
                text=text,
                image=image_path,
                is_promotion=is_promotion,
                shares=0,
            )
        except Exception:
            if image_path:
                await self.storage.delete_image(image_path)
            raise

        logger.info(
            "Post created",
            post_id=str(post.id),
            user_id=str(author.id),
            has_image=image_path is not None,
        )

        return await self.post_repo.get_with_relations(post.id)

    async def delete_post(self, post_id: UUID, requester: User) -> None:
        """
        Delete a post owned by the requester.

        Raises:
            PostNotFoundError: If post doesn't exist
            AuthorizationError: If requester is not the owner
        """
        post = await self._get_post_or_raise(post_id)

        if post.user_id != requester.id:
            raise AuthorizationError("Not authorized to delete this post")

        image_path = post.image
        await self.post_repo.delete(post)
        # The row must be gone for good before its image is
        await self.session.commit()

        logger.info("Post deleted", post_id=str(post_id), user_id=str(requester.id))

        if image_path and not await self.storage.delete_image(image_path):
            logger.warning("Post image left behind", post_id=str(post_id), image=image_path)

    # ═══════════════════════════════════════════════════════════════════════════
    # COMMENTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_comment(
        self,
        post_id: UUID,
        author: User,
        text: Optional[str],
    ) -> Tuple[Comment, int]:
        """
        Append a comment to a post.

        Args:
            post_id: Post to comment on
            author: Authenticated user
            text: Comment body, stored trimmed

        Returns:
            Tuple of (comment with author loaded, total comment count)

        Raises:
            ValidationError: If text is empty after trimming
            PostNotFoundError: If post doesn't exist
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("Comment text is required")

        post = await self._get_post_or_raise(post_id)

        comment = await self.comment_repo.create(
            post_id=post.id,
            user_id=author.id,
            text=text,
        )
        count = await self.comment_repo.count_for_post(post.id)

        logger.info(
            "Comment added",
            post_id=str(post.id),
            comment_id=comment.id,
            user_id=str(author.id),
        )

        return await self.comment_repo.get_with_author(comment.id), count

    async def list_comments(self, post_id: UUID) -> list[Comment]:
        """
        All comments of a post in insertion order.

        Raises:
            PostNotFoundError: If post doesn't exist
        """
        post = await self._get_post_or_raise(post_id)
        return await self.comment_repo.list_for_post(post.id)
