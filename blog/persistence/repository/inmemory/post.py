"""In-memory post repository for testing."""

from blog.domain.model import Author, CommentThreadEntry, PostDetail, PostSummary
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId
from blog.persistence.error import RecordNotFoundError

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all(self) -> list[PostSummary]:
        """List every post as an (id, title) projection."""
        return [
            PostSummary(id=post.id, title=post.title)
            for post in self._store.posts.values()
        ]

    async def get_detail(self, post_id: PostId) -> PostDetail:
        """Load a post with its comments, newest first."""
        post = self._store.posts.get(post_id)
        if post is None:
            raise RecordNotFoundError("Post", str(post_id))

        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)

        entries = []
        for comment in comments:
            author = self._store.users[comment.user_id]
            entries.append(
                CommentThreadEntry(
                    id=comment.id,
                    message=comment.message,
                    parent_id=comment.parent_id,
                    created_at=comment.created_at,
                    user=Author(id=author.id, name=author.name),
                    like_count=self._store.like_count(comment.id),
                )
            )

        return PostDetail(
            id=post.id, title=post.title, body=post.body, comments=entries
        )
