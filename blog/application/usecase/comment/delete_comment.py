"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.base import ResponseModel
from blog.domain.error import NotAuthorizedError
from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Requesting user, must be the author


class DeleteCommentResponse(ResponseModel):
    """Delete comment response."""

    id: str


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: DeleteCommentRequest
    ) -> Outcome[DeleteCommentResponse]:
        """Execute delete comment flow.

        Ownership is checked before anything is deleted.

        Raises:
            NotAuthorizedError: If the requesting user did not write the comment
        """
        comment_id = CommentId(UUID(request.comment_id))

        with logfire.span("delete_comment.execute", comment_id=request.comment_id):
            owner = await commit(self.comment_service.get_owner_id(comment_id))
            if isinstance(owner, Err):
                return owner

            if owner.value != UserId(UUID(request.user_id)):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=request.comment_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError(request.comment_id, request.user_id)

            outcome = await commit(self.comment_service.delete_comment(comment_id))
            if isinstance(outcome, Err):
                return outcome

            return Ok(DeleteCommentResponse(id=str(outcome.value)))
