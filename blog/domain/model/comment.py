"""Comment entity.

Comments form a reply tree on a post through the nullable ``parent_id``.
The tree is never materialized as nested objects: readers get a flat list
with parent references.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.model.user import Author
from blog.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    ``user_id`` is fixed at creation and decides who may edit or delete.
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    message: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class CommentThreadEntry(DomainModel):
    """A comment as listed under its post.

    Joins the authoring user and the derived number of likes.
    """

    id: CommentId
    message: str
    parent_id: Optional[CommentId] = None
    created_at: datetime
    user: Author
    like_count: int = Field(default=0, ge=0)
