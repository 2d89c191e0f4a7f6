"""Post entity and its read projections."""

from pydantic import Field

from blog.domain.model.comment import CommentThreadEntry
from blog.domain.model.common import DomainModel
from blog.domain.value import PostId


class Post(DomainModel):
    """Post entity.

    Posts own zero or more comments. The API never creates or edits posts.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    body: str


class PostSummary(DomainModel):
    """List-view projection of a post (body and comments excluded)."""

    id: PostId
    title: str


class PostDetail(DomainModel):
    """A post with its comments, newest first, each carrying a like count."""

    id: PostId
    title: str
    body: str
    comments: list[CommentThreadEntry] = Field(default_factory=list)
