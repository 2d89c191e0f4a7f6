"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.outcome import Err, Ok, Outcome, commit
from blog.application.usecase.comment.view import CommentItem, to_new_comment_item
from blog.domain.error import ValidationError
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

MESSAGE_REQUIRED = "Message is required"


def require_message(message: str | None) -> str:
    """Reject a missing or empty comment message.

    Raises:
        ValidationError: If the message is None or the empty string
    """
    if message is None or message == "":
        raise ValidationError(MESSAGE_REQUIRED)
    return message


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    user_id: str  # Requesting user, from the identity cookie
    message: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> Outcome[CommentItem]:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment with zero likes, or the store failure
            (for example a post or parent that does not exist)

        Raises:
            ValidationError: If the message is missing or empty
        """
        message = require_message(request.message)

        with logfire.span("create_comment.execute", post_id=request.post_id):
            outcome = await commit(
                self.comment_service.create_comment(
                    post_id=PostId(UUID(request.post_id)),
                    user_id=UserId(UUID(request.user_id)),
                    message=message,
                    parent_id=CommentId(UUID(request.parent_id))
                    if request.parent_id
                    else None,
                )
            )
            if isinstance(outcome, Err):
                return outcome

            return Ok(to_new_comment_item(outcome.value))
