"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.base import ResponseModel
from blog.domain.service import LikeService
from blog.domain.value import CommentId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str  # UUID string
    user_id: str  # Requesting user, from the identity cookie


class ToggleLikeResponse(ResponseModel):
    """Whether the request added (True) or removed (False) a like."""

    add_like: bool


class ToggleLikeUseCase:
    """Use case for liking or un-liking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> Outcome[ToggleLikeResponse]:
        outcome = await commit(
            self.like_service.toggle_like(
                user_id=UserId(UUID(request.user_id)),
                comment_id=CommentId(UUID(request.comment_id)),
            )
        )
        if isinstance(outcome, Err):
            return outcome

        return Ok(ToggleLikeResponse(add_like=outcome.value))
