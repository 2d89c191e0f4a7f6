"""Comment repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.comment import Comment, CommentThreadEntry
from blog.domain.value import CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, comment: Comment) -> CommentThreadEntry:
        """Insert a comment and select back its canonical fields.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment joined with its author

        Raises:
            IntegrityError: If the post, parent or user does not exist
        """
        pass

    @abstractmethod
    async def get_owner_id(self, comment_id: CommentId) -> UserId:
        """Look up who wrote a comment.

        Args:
            comment_id: The comment ID

        Returns:
            The authoring user's ID

        Raises:
            RecordNotFoundError: If no comment has this ID
        """
        pass

    @abstractmethod
    async def update_message(self, comment_id: CommentId, message: str) -> str:
        """Replace the message of a comment.

        Args:
            comment_id: The comment ID
            message: New message text

        Returns:
            The stored message

        Raises:
            RecordNotFoundError: If no comment has this ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> CommentId:
        """Delete a comment (hard delete).

        Replies and likes follow the store's cascade rules.

        Args:
            comment_id: The comment ID to delete

        Returns:
            The ID of the deleted comment

        Raises:
            RecordNotFoundError: If no comment has this ID
        """
        pass
