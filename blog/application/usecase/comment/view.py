"""Comment response shaping.

The store hands back comments with a like count; the likes of the
requesting user come from a second query. These helpers merge the two into
the shape the client renders. They are pure functions over query results.
"""

from collections.abc import Set
from datetime import datetime

from blog.application.usecase.base import ResponseModel
from blog.domain.model.comment import CommentThreadEntry
from blog.domain.value import CommentId


class CommentUser(ResponseModel):
    """Author of a comment."""

    id: str
    name: str


class CommentItem(ResponseModel):
    """Comment as returned to the client."""

    id: str
    message: str
    parent_id: str | None
    created_at: datetime
    user: CommentUser
    like_count: int
    liked_by_me: bool


def to_comment_item(
    entry: CommentThreadEntry, liked_comment_ids: Set[CommentId]
) -> CommentItem:
    """Shape a stored comment, deriving ``liked_by_me`` from the liked set."""
    return CommentItem(
        id=str(entry.id),
        message=entry.message,
        parent_id=str(entry.parent_id) if entry.parent_id else None,
        created_at=entry.created_at,
        user=CommentUser(id=str(entry.user.id), name=entry.user.name),
        like_count=entry.like_count,
        liked_by_me=entry.id in liked_comment_ids,
    )


def to_new_comment_item(entry: CommentThreadEntry) -> CommentItem:
    """Shape a comment that was just created.

    A new comment cannot have likes yet, so the like fields are fixed
    rather than queried.
    """
    return to_comment_item(entry.model_copy(update={"like_count": 0}), frozenset())
