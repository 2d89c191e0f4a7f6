"""Integration tests for PostRepository.

These tests run against a migrated PostgreSQL with the seed data applied
(users John and Sally, posts "Post 1" and "Post 2").
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from blog.domain.model import Comment, Like
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from blog.domain.value import CommentId, PostId
from blog.persistence.error import RecordNotFoundError
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _seeded_post_id(env, title: str) -> PostId:
    post_repo = await env.get(PostRepository)
    return next(post.id for post in await post_repo.find_all() if post.title == title)


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_find_all_lists_seeded_posts(self, integration_env):
        """Both seeded posts are listed as (id, title) projections."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)

        # Act
        posts = await post_repo.find_all()

        # Assert
        titles = {post.title for post in posts}
        assert {"Post 1", "Post 2"} <= titles

    @pytest.mark.asyncio
    async def test_get_detail_orders_comments_newest_first(self, integration_env):
        """Comments come back ordered by created_at, descending."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        user_repo = await integration_env.get(UserRepository)
        john = await user_repo.find_first_by_name("John")
        post_id = await _seeded_post_id(integration_env, "Post 2")

        now = datetime.now(timezone.utc)
        older = Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            user_id=john.id,
            message="older",
            created_at=now - timedelta(minutes=5),
        )
        newer = Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            user_id=john.id,
            message="newer",
            created_at=now,
        )
        await comment_repo.create(older)
        await comment_repo.create(newer)

        # Act
        detail = await post_repo.get_detail(post_id)

        # Assert
        ids = [entry.id for entry in detail.comments]
        assert ids.index(newer.id) < ids.index(older.id)

        # Cleanup
        await comment_repo.delete(older.id)
        await comment_repo.delete(newer.id)

    @pytest.mark.asyncio
    async def test_get_detail_derives_like_counts(self, integration_env):
        """Each comment carries the number of like rows pointing at it."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        like_repo = await integration_env.get(LikeRepository)
        user_repo = await integration_env.get(UserRepository)
        john = await user_repo.find_first_by_name("John")
        sally = await user_repo.find_first_by_name("Sally")
        post_id = await _seeded_post_id(integration_env, "Post 1")

        liked = Comment(
            id=CommentId(uuid4()), post_id=post_id, user_id=john.id, message="liked"
        )
        unliked = Comment(
            id=CommentId(uuid4()), post_id=post_id, user_id=john.id, message="quiet"
        )
        await comment_repo.create(liked)
        await comment_repo.create(unliked)
        await like_repo.create(Like(user_id=john.id, comment_id=liked.id))
        await like_repo.create(Like(user_id=sally.id, comment_id=liked.id))

        # Act
        detail = await post_repo.get_detail(post_id)

        # Assert
        counts = {entry.id: entry.like_count for entry in detail.comments}
        assert counts[liked.id] == 2
        assert counts[unliked.id] == 0
        entry = next(entry for entry in detail.comments if entry.id == liked.id)
        assert entry.user.id == john.id
        assert entry.user.name == "John"

        # Cleanup
        await comment_repo.delete(liked.id)
        await comment_repo.delete(unliked.id)

    @pytest.mark.asyncio
    async def test_get_detail_of_unknown_post_raises(self, integration_env):
        """An unknown post id is a missing record, not an empty post."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(RecordNotFoundError):
            await post_repo.get_detail(PostId(uuid4()))
