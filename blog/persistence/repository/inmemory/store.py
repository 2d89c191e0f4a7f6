"""Shared in-memory tables backing the in-memory repositories.

Mirrors the relational rules the handlers rely on: foreign keys are checked
on insert (raising ``IntegrityError`` like the database driver would) and
deleting a comment cascades to its replies and likes.
"""

from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, PostId, UserId


class InMemoryStore:
    """Process-local tables for users, posts, comments and likes."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.likes: set[tuple[UserId, CommentId]] = set()

    def add_user(self, name: str) -> User:
        """Seed a user."""
        user = User(id=UserId(uuid4()), name=name)
        self.users[user.id] = user
        return user

    def add_post(self, title: str, body: str) -> Post:
        """Seed a post."""
        post = Post(id=PostId(uuid4()), title=title, body=body)
        self.posts[post.id] = post
        return post

    def insert_comment(self, comment: Comment) -> Comment:
        """Insert a comment, enforcing its foreign keys."""
        if comment.post_id not in self.posts:
            raise IntegrityError(
                "Foreign key violation: comments.post_id", None, Exception()
            )
        if comment.user_id not in self.users:
            raise IntegrityError(
                "Foreign key violation: comments.user_id", None, Exception()
            )
        if comment.parent_id is not None and comment.parent_id not in self.comments:
            raise IntegrityError(
                "Foreign key violation: comments.parent_id", None, Exception()
            )
        self.comments[comment.id] = comment
        return comment

    def insert_like(self, user_id: UserId, comment_id: CommentId) -> None:
        """Insert a like, enforcing its primary and foreign keys."""
        if (user_id, comment_id) in self.likes:
            raise IntegrityError("Duplicate like", None, Exception())
        if comment_id not in self.comments or user_id not in self.users:
            raise IntegrityError(
                "Foreign key violation: likes.comment_id", None, Exception()
            )
        self.likes.add((user_id, comment_id))

    def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment with its replies (recursively) and likes."""
        children = [c.id for c in self.comments.values() if c.parent_id == comment_id]
        for child_id in children:
            self.delete_comment(child_id)

        self.comments.pop(comment_id, None)
        self.likes = {like for like in self.likes if like[1] != comment_id}

    def like_count(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(1 for _, liked in self.likes if liked == comment_id)
