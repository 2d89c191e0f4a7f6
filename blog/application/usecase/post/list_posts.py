"""List posts use case."""

import logfire

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.base import ResponseModel
from blog.domain.service import PostService


class PostListItem(ResponseModel):
    """Post list item in response."""

    id: str
    title: str


class ListPostsUseCase:
    """Use case for listing every post by id and title."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self) -> Outcome[list[PostListItem]]:
        """Execute list posts flow.

        Returns:
            Posts in store order, or the store failure
        """
        with logfire.span("list_posts.execute"):
            outcome = await commit(self.post_service.list_posts())
            if isinstance(outcome, Err):
                return outcome

            return Ok(
                [
                    PostListItem(id=str(post.id), title=post.title)
                    for post in outcome.value
                ]
            )
