"""Get post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.base import ResponseModel
from blog.application.usecase.comment.view import CommentItem, to_comment_item
from blog.domain.service import LikeService, PostService
from blog.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str  # Requesting user, from the identity cookie


class GetPostResponse(ResponseModel):
    """Post with its comments, newest first."""

    title: str
    body: str
    comments: list[CommentItem]


class GetPostUseCase:
    """Use case for reading a post together with its comment thread."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: GetPostRequest) -> Outcome[GetPostResponse]:
        """Execute get post flow.

        Steps:
        1. Load the post, its comments and their like counts
        2. Load the requesting user's likes on exactly those comments
        3. Merge both into ``like_count`` / ``liked_by_me`` per comment

        Args:
            request: Get post request with post ID and requesting user ID

        Returns:
            The shaped post, or the first store failure
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            post_outcome = await commit(
                self.post_service.get_post_detail(PostId(UUID(request.post_id)))
            )
            if isinstance(post_outcome, Err):
                return post_outcome
            post = post_outcome.value

            likes_outcome = await commit(
                self.like_service.get_liked_comment_ids(
                    user_id=UserId(UUID(request.user_id)),
                    comment_ids=[comment.id for comment in post.comments],
                )
            )
            if isinstance(likes_outcome, Err):
                return likes_outcome
            liked_comment_ids = likes_outcome.value

            return Ok(
                GetPostResponse(
                    title=post.title,
                    body=post.body,
                    comments=[
                        to_comment_item(comment, liked_comment_ids)
                        for comment in post.comments
                    ],
                )
            )
