"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, UserId

__all__ = [
    "UserId",
    "PostId",
    "CommentId",
]
