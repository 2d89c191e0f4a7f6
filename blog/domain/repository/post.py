"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List

from blog.domain.model.post import PostDetail, PostSummary
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post read operations. Posts are seeded
    outside the API, so there are no write methods.
    """

    @abstractmethod
    async def find_all(self) -> List[PostSummary]:
        """List every post as an (id, title) projection.

        Returns:
            Posts in the order the store yields them
        """
        pass

    @abstractmethod
    async def get_detail(self, post_id: PostId) -> PostDetail:
        """Load a post with its comments.

        Comments are ordered by ``created_at`` descending and each carries
        its author and like count.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with its comment list

        Raises:
            RecordNotFoundError: If no post has this ID
        """
        pass
