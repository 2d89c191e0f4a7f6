"""End-to-end tests for post endpoints."""

from datetime import datetime
from uuid import uuid4

from blog.domain.model import Comment
from blog.domain.value import CommentId
from tests.harness import create_client_fixture, post_titled, store_of, user_named

client = create_client_fixture()


class TestListPosts:
    """End-to-end tests for GET /posts."""

    def test_lists_id_and_title_only(self, client):
        """Should return every post without body or comments."""
        # Act
        response = client.get("/posts")

        # Assert
        assert response.status_code == 200
        posts = response.json()
        assert sorted(p["title"] for p in posts) == ["Post 1", "Post 2"]
        for post in posts:
            assert set(post) == {"id", "title"}


class TestGetPost:
    """End-to-end tests for GET /posts/{post_id}."""

    def test_post_with_comment_thread(self, client):
        """Should return title, body and camelCase comments newest first."""
        # Arrange
        store = store_of(client)
        john = user_named(store, "John")
        sally = user_named(store, "Sally")
        post = post_titled(store, "Post 1")
        older = store.insert_comment(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                user_id=sally.id,
                message="Older",
                created_at=datetime(2024, 5, 1, 12),
            )
        )
        newer = store.insert_comment(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                user_id=john.id,
                message="Newer",
                parent_id=older.id,
                created_at=datetime(2024, 5, 2, 12),
            )
        )
        store.insert_like(john.id, older.id)

        # Act
        response = client.get(f"/posts/{post.id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Post 1"
        assert data["body"] == post.body
        assert [c["id"] for c in data["comments"]] == [str(newer.id), str(older.id)]

        first, second = data["comments"]
        assert first["parentId"] == str(older.id)
        assert first["user"] == {"id": str(john.id), "name": "John"}
        assert first["likeCount"] == 0
        assert first["likedByMe"] is False
        assert "createdAt" in first
        assert second["parentId"] is None
        assert second["likeCount"] == 1
        assert second["likedByMe"] is True

    def test_missing_post_is_server_error(self, client):
        """Should surface the store's not-found failure as a 500."""
        # Arrange
        missing = uuid4()

        # Act
        response = client.get(f"/posts/{missing}")

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"] == f"Post not found: {missing}"

    def test_malformed_post_id_is_rejected(self, client):
        """Should reject a post id that is not a UUID before any store call."""
        # Act
        response = client.get("/posts/not-a-uuid")

        # Assert
        assert response.status_code == 422
