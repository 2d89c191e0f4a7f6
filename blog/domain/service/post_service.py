"""Post domain service."""

import logfire

from blog.domain.model.post import PostDetail, PostSummary
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self) -> list[PostSummary]:
        """List all posts as (id, title) summaries."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post_detail(self, post_id: PostId) -> PostDetail:
        """Get a post with its comments, newest first.

        Args:
            post_id: Post ID

        Returns:
            Post detail with comment thread

        Raises:
            RecordNotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_detail", post_id=str(post_id)):
            post = await self.post_repository.get_detail(post_id)
            logfire.info(
                "Post found",
                post_id=str(post_id),
                title=post.title,
                comment_count=len(post.comments),
            )
            return post
