"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from blog.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsUseCase,
    PostListItem,
)
from blog.interface.api.identity import requesting_user_id
from blog.interface.api.routes.outcome import unwrap

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=list[PostListItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostListItem]:
    """List every post by id and title."""
    return unwrap(await list_posts_use_case.execute())


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    user_id: str = Depends(requesting_user_id),
) -> GetPostResponse:
    """Get a post with its comments, newest first.

    Each comment carries its like count and whether the requesting user
    liked it.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        user_id: Requesting user, from the identity cookie

    Returns:
        Post title, body and comments

    Raises:
        HTTPException: 500 if the post does not exist or the store fails
    """
    return unwrap(
        await get_post_use_case.execute(
            GetPostRequest(post_id=str(post_id), user_id=user_id)
        )
    )
