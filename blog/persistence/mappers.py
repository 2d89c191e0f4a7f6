"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import (
    Author,
    Comment,
    CommentThreadEntry,
    Like,
    PostSummary,
    User,
)
from blog.domain.value import CommentId, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(id=UserId(_uuid(row["id"])), name=row["name"])


def row_to_post_summary(row: Dict[str, Any]) -> PostSummary:
    """Convert an (id, title) row to a PostSummary."""
    return PostSummary(id=PostId(_uuid(row["id"])), title=row["title"])


def row_to_comment_thread_entry(row: Dict[str, Any]) -> CommentThreadEntry:
    """Convert a comment row joined with its author and like count.

    Args:
        row: Row with comment columns plus ``user_id``, ``user_name`` and
            an optional ``like_count``

    Returns:
        CommentThreadEntry read model
    """
    return CommentThreadEntry(
        id=CommentId(_uuid(row["id"])),
        message=row["message"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
        user=Author(id=UserId(_uuid(row["user_id"])), name=row["user_name"]),
        like_count=row.get("like_count") or 0,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()
