"""In-memory like repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.like import Like
from blog.domain.repository.like import LikeRepository
from blog.domain.value import CommentId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Find a user's like on a comment."""
        if (user_id, comment_id) in self._store.likes:
            return Like(user_id=user_id, comment_id=comment_id)
        return None

    async def find_by_user_and_comments(
        self,
        user_id: UserId,
        comment_ids: Sequence[CommentId],
    ) -> list[Like]:
        """Find a user's likes on several comments (batch query)."""
        wanted = set(comment_ids)
        return [
            Like(user_id=liker, comment_id=comment_id)
            for liker, comment_id in self._store.likes
            if liker == user_id and comment_id in wanted
        ]

    async def create(self, like: Like) -> Like:
        """Insert a like.

        Raises:
            IntegrityError: If the like already exists or references a
                missing comment or user
        """
        self._store.insert_like(like.user_id, like.comment_id)
        return like

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a like."""
        key = (user_id, comment_id)
        if key not in self._store.likes:
            return False
        self._store.likes.discard(key)
        return True
