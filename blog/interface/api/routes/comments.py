"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.error import NotAuthorizedError, ValidationError
from blog.interface.api.identity import requesting_user_id
from blog.interface.api.routes.outcome import unwrap

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    ``message`` is optional here so that a missing message gets the same
    400 response as an empty one instead of a 422.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str | None = None
    parent_id: UUID | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    message: str | None = None


@router.post("/{post_id}/comments", response_model=CommentItem)
async def create_comment(
    post_id: UUID,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    request: CreateCommentAPIRequest | None = None,
    user_id: str = Depends(requesting_user_id),
) -> CommentItem:
    """Comment on a post or reply to another comment.

    Args:
        post_id: Post UUID
        create_comment_use_case: Create comment use case from DI
        request: Comment message and optional parent comment
        user_id: Requesting user, from the identity cookie

    Returns:
        The new comment with ``likeCount`` 0 and ``likedByMe`` false

    Raises:
        HTTPException: 400 if the message is missing or empty, 500 if the
            store rejects the comment
    """
    body = request or CreateCommentAPIRequest()
    try:
        outcome = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                user_id=user_id,
                message=body.message,
                parent_id=str(body.parent_id) if body.parent_id else None,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return unwrap(outcome)


@router.put("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    request: UpdateCommentAPIRequest | None = None,
    user_id: str = Depends(requesting_user_id),
) -> UpdateCommentResponse:
    """Change the message of a comment written by the requesting user.

    Raises:
        HTTPException: 400 if the message is missing or empty, 401 if the
            requesting user did not write the comment, 500 if the comment
            does not exist or the store fails
    """
    body = request or UpdateCommentAPIRequest()
    try:
        outcome = await update_comment_use_case.execute(
            UpdateCommentRequest(
                post_id=str(post_id),
                comment_id=str(comment_id),
                user_id=user_id,
                message=body.message,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    return unwrap(outcome)


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user_id: str = Depends(requesting_user_id),
) -> DeleteCommentResponse:
    """Delete a comment written by the requesting user.

    Replies and likes go with it.

    Raises:
        HTTPException: 401 if the requesting user did not write the
            comment, 500 if the comment does not exist or the store fails
    """
    try:
        outcome = await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_id),
                comment_id=str(comment_id),
                user_id=user_id,
            )
        )
    except NotAuthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    deleted = unwrap(outcome)
    logfire.info("Comment deleted", comment_id=deleted.id)
    return deleted


@router.post(
    "/{post_id}/comments/{comment_id}/toggleLike",
    response_model=ToggleLikeResponse,
)
async def toggle_like(
    post_id: UUID,
    comment_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    user_id: str = Depends(requesting_user_id),
) -> ToggleLikeResponse:
    """Like a comment, or take the like back if it is already there."""
    return unwrap(
        await toggle_like_use_case.execute(
            ToggleLikeRequest(comment_id=str(comment_id), user_id=user_id)
        )
    )
