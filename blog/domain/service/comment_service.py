"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from blog.domain.model.comment import Comment, CommentThreadEntry
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        message: str,
        parent_id: CommentId | None = None,
    ) -> CommentThreadEntry:
        """Create a comment on a post or a reply to another comment.

        Parent/post consistency is left to the store.

        Args:
            post_id: Post ID
            user_id: Authoring user ID
            message: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment joined with its author
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            user_id=str(user_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                message=message,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            created = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(created.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return created

    async def get_owner_id(self, comment_id: CommentId) -> UserId:
        """Get the ID of the user who wrote a comment."""
        with logfire.span("comment_service.get_owner_id", comment_id=str(comment_id)):
            return await self.comment_repository.get_owner_id(comment_id)

    async def update_message(self, comment_id: CommentId, message: str) -> str:
        """Replace the message of a comment.

        Args:
            comment_id: Comment ID
            message: New message text

        Returns:
            The stored message
        """
        with logfire.span(
            "comment_service.update_message",
            comment_id=str(comment_id),
            message_length=len(message),
        ):
            updated = await self.comment_repository.update_message(comment_id, message)
            logfire.info("Comment message updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId) -> CommentId:
        """Delete a comment; replies and likes go with it."""
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(deleted))
            return deleted
