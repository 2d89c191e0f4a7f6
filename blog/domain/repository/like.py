"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.like import Like
from blog.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for Like join rows."""

    @abstractmethod
    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Find a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The like if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self,
        user_id: UserId,
        comment_ids: Sequence[CommentId],
    ) -> List[Like]:
        """Find a user's likes on several comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comments to check

        Returns:
            Likes by the user on the given comments
        """
        pass

    @abstractmethod
    async def create(self, like: Like) -> Like:
        """Insert a like.

        Raises:
            IntegrityError: If the like already exists or the comment/user
                does not exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a like.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
