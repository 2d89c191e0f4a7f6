"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment, CommentThreadEntry
from blog.domain.model.like import Like
from blog.domain.model.post import Post, PostDetail, PostSummary
from blog.domain.model.user import Author, User

__all__ = [
    "User",
    "Author",
    "Post",
    "PostSummary",
    "PostDetail",
    "Comment",
    "CommentThreadEntry",
    "Like",
]
