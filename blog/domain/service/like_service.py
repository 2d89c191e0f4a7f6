"""Like domain service."""

import logfire

from blog.domain.model.like import Like
from blog.domain.repository import LikeRepository
from blog.domain.value import CommentId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def get_liked_comment_ids(
        self, user_id: UserId, comment_ids: list[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has liked.

        Args:
            user_id: User ID
            comment_ids: Comments to check

        Returns:
            IDs of the comments the user liked
        """
        if not comment_ids:
            return set()

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_comments(
            user_id=user_id,
            comment_ids=comment_ids,
        )
        return {like.comment_id for like in likes}

    async def toggle_like(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Like a comment, or remove the like if it is already there.

        Args:
            user_id: User ID
            comment_id: Comment ID

        Returns:
            True if a like was added, False if one was removed
        """
        with logfire.span(
            "like_service.toggle_like", comment_id=str(comment_id), user_id=str(user_id)
        ):
            existing = await self.like_repository.find(user_id, comment_id)

            if existing is None:
                await self.like_repository.create(
                    Like(user_id=user_id, comment_id=comment_id)
                )
                logfire.info("Like added", comment_id=str(comment_id))
                return True

            await self.like_repository.delete(user_id, comment_id)
            logfire.info("Like removed", comment_id=str(comment_id))
            return False
