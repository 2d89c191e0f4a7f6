"""In-memory comment repository for testing."""

from datetime import datetime

from blog.domain.model import Author, Comment, CommentThreadEntry
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, UserId
from blog.persistence.error import RecordNotFoundError

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _get(self, comment_id: CommentId) -> Comment:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            raise RecordNotFoundError("Comment", str(comment_id))
        return comment

    async def create(self, comment: Comment) -> CommentThreadEntry:
        """Insert a comment and select it back joined with its author."""
        saved = self._store.insert_comment(comment)
        author = self._store.users[saved.user_id]
        return CommentThreadEntry(
            id=saved.id,
            message=saved.message,
            parent_id=saved.parent_id,
            created_at=saved.created_at,
            user=Author(id=author.id, name=author.name),
        )

    async def get_owner_id(self, comment_id: CommentId) -> UserId:
        """Look up who wrote a comment."""
        return self._get(comment_id).user_id

    async def update_message(self, comment_id: CommentId, message: str) -> str:
        """Replace the message of a comment."""
        comment = self._get(comment_id)
        # Comments are immutable; store an updated copy
        self._store.comments[comment_id] = comment.model_copy(
            update={"message": message, "updated_at": datetime.now()}
        )
        return message

    async def delete(self, comment_id: CommentId) -> CommentId:
        """Delete a comment with its replies and likes."""
        self._get(comment_id)
        self._store.delete_comment(comment_id)
        return comment_id
