"""Post use cases."""

from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsUseCase, PostListItem

__all__ = [
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsUseCase",
    "PostListItem",
]
