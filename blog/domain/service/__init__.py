"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .like_service import LikeService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "LikeService",
    "PostService",
    "Service",
    "UserService",
]
