"""Unit tests for CommentService."""

import pytest
from sqlalchemy.exc import IntegrityError

from blog.domain.service import CommentService
from blog.persistence.error import RecordNotFoundError
from blog.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, post_titled, user_named

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """A new comment should be stored and returned with its author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        john = user_named(store, "John")
        post = post_titled(store, "Post 1")

        # Act
        entry = await comment_service.create_comment(
            post_id=post.id, user_id=john.id, message="First!"
        )

        # Assert
        assert entry.message == "First!"
        assert entry.parent_id is None
        assert entry.user.name == "John"
        assert entry.like_count == 0
        assert store.comments[entry.id].post_id == post.id

    @pytest.mark.asyncio
    async def test_create_reply_keeps_parent(self, unit_env):
        """A reply should reference its parent comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        john = user_named(store, "John")
        post = post_titled(store, "Post 1")
        parent = await comment_service.create_comment(
            post_id=post.id, user_id=john.id, message="Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            post_id=post.id, user_id=john.id, message="Reply", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_create_on_missing_post_is_rejected_by_store(self, unit_env):
        """The store's foreign key rejects comments on unknown posts."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        john = user_named(store, "John")
        ghost_post = store.add_post("Ghost", "gone")
        del store.posts[ghost_post.id]

        # Act & Assert
        with pytest.raises(IntegrityError):
            await comment_service.create_comment(
                post_id=ghost_post.id, user_id=john.id, message="Hello?"
            )
        assert store.comments == {}


class TestOwnershipAndDeletion:
    """Tests for get_owner_id and delete_comment."""

    @pytest.mark.asyncio
    async def test_get_owner_id_returns_author(self, unit_env):
        """The owner of a comment is the user who wrote it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        sally = user_named(store, "Sally")
        post = post_titled(store, "Post 2")
        entry = await comment_service.create_comment(
            post_id=post.id, user_id=sally.id, message="Mine"
        )

        # Act
        owner_id = await comment_service.get_owner_id(entry.id)

        # Assert
        assert owner_id == sally.id

    @pytest.mark.asyncio
    async def test_get_owner_id_of_missing_comment_raises(self, unit_env):
        """Looking up the owner of an unknown comment is a store failure."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        john = user_named(store, "John")
        post = post_titled(store, "Post 1")
        entry = await comment_service.create_comment(
            post_id=post.id, user_id=john.id, message="Short-lived"
        )
        store.delete_comment(entry.id)

        # Act & Assert
        with pytest.raises(RecordNotFoundError):
            await comment_service.get_owner_id(entry.id)

    @pytest.mark.asyncio
    async def test_delete_removes_replies_and_likes(self, unit_env):
        """Deleting a comment should take its replies and likes with it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        john = user_named(store, "John")
        sally = user_named(store, "Sally")
        post = post_titled(store, "Post 1")
        parent = await comment_service.create_comment(
            post_id=post.id, user_id=john.id, message="Parent"
        )
        reply = await comment_service.create_comment(
            post_id=post.id, user_id=sally.id, message="Reply", parent_id=parent.id
        )
        store.insert_like(sally.id, parent.id)
        store.insert_like(john.id, reply.id)

        # Act
        deleted_id = await comment_service.delete_comment(parent.id)

        # Assert
        assert deleted_id == parent.id
        assert store.comments == {}
        assert store.likes == set()
