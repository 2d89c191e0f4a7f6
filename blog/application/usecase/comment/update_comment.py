"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.base import ResponseModel
from blog.application.usecase.comment.create_comment import require_message
from blog.domain.error import NotAuthorizedError
from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Requesting user, must be the author
    message: str | None = None


class UpdateCommentResponse(ResponseModel):
    """Update comment response.

    The like fields are placeholders and do not reflect existing likes.
    """

    message: str
    like_count: int = 0
    liked_by_me: bool = False


class UpdateCommentUseCase:
    """Use case for changing the message of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: UpdateCommentRequest
    ) -> Outcome[UpdateCommentResponse]:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The new message, or the store failure (including a comment
            that does not exist)

        Raises:
            ValidationError: If the message is missing or empty
            NotAuthorizedError: If the requesting user did not write the comment
        """
        message = require_message(request.message)
        comment_id = CommentId(UUID(request.comment_id))

        with logfire.span("update_comment.execute", comment_id=request.comment_id):
            owner = await commit(self.comment_service.get_owner_id(comment_id))
            if isinstance(owner, Err):
                return owner

            if owner.value != UserId(UUID(request.user_id)):
                logfire.warn(
                    "Unauthorized comment update attempt",
                    comment_id=request.comment_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError(request.comment_id, request.user_id)

            outcome = await commit(
                self.comment_service.update_message(comment_id, message)
            )
            if isinstance(outcome, Err):
                return outcome

            return Ok(UpdateCommentResponse(message=outcome.value))
