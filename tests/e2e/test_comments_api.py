"""End-to-end tests for comment endpoints."""

from uuid import uuid4

from blog.domain.model import Comment
from blog.domain.value import CommentId
from tests.harness import create_client_fixture, post_titled, store_of, user_named

client = create_client_fixture()


def _sallys_comment(store, post_id) -> Comment:
    return store.insert_comment(
        Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            user_id=user_named(store, "Sally").id,
            message="Sally was here",
        )
    )


class TestCreateComment:
    """End-to-end tests for POST /posts/{post_id}/comments."""

    def test_create_comment(self, client):
        """Should create a comment attributed to the current user."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")

        # Act
        response = client.post(f"/posts/{post.id}/comments", json={"message": "Hi"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Hi"
        assert data["parentId"] is None
        assert data["user"]["name"] == "John"
        assert data["likeCount"] == 0
        assert data["likedByMe"] is False

        listed = client.get(f"/posts/{post.id}").json()["comments"]
        assert [c["id"] for c in listed] == [data["id"]]

    def test_create_reply(self, client):
        """Should accept a parentId and echo it back."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")
        parent = client.post(
            f"/posts/{post.id}/comments", json={"message": "Parent"}
        ).json()

        # Act
        response = client.post(
            f"/posts/{post.id}/comments",
            json={"message": "Reply", "parentId": parent["id"]},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["parentId"] == parent["id"]

    def test_empty_or_missing_message_is_bad_request(self, client):
        """Should reject empty, null and absent messages with the same 400."""
        # Arrange
        store = store_of(client)
        url = f"/posts/{post_titled(store, 'Post 1').id}/comments"

        # Act
        responses = [
            client.post(url, json={"message": ""}),
            client.post(url, json={"message": None}),
            client.post(url, json={}),
        ]

        # Assert
        for response in responses:
            assert response.status_code == 400
            assert response.json()["detail"] == "Message is required"
        assert store.comments == {}

    def test_comment_on_missing_post_is_server_error(self, client):
        """Should map the store's foreign key failure to a 500."""
        # Act
        response = client.post(f"/posts/{uuid4()}/comments", json={"message": "Hi"})

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"]
        assert store_of(client).comments == {}


class TestUpdateComment:
    """End-to-end tests for PUT /posts/{post_id}/comments/{comment_id}."""

    def test_author_updates_message(self, client):
        """Should change the message and return placeholder like fields."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")
        created = client.post(
            f"/posts/{post.id}/comments", json={"message": "Before"}
        ).json()
        client.post(f"/posts/{post.id}/comments/{created['id']}/toggleLike")

        # Act
        response = client.put(
            f"/posts/{post.id}/comments/{created['id']}", json={"message": "After"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "message": "After",
            "likeCount": 0,
            "likedByMe": False,
        }
        listed = client.get(f"/posts/{post.id}").json()["comments"]
        assert listed[0]["message"] == "After"
        assert listed[0]["likeCount"] == 1

    def test_non_author_is_unauthorized(self, client):
        """Should refuse to edit another user's comment."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")
        comment = _sallys_comment(store, post.id)

        # Act
        response = client.put(
            f"/posts/{post.id}/comments/{comment.id}", json={"message": "Mine now"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == (
            "You do not have permission to edit this message"
        )
        assert store.comments[comment.id].message == "Sally was here"

    def test_empty_message_is_bad_request(self, client):
        """Should validate the message like creation does."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")
        comment = _sallys_comment(store, post.id)

        # Act
        response = client.put(
            f"/posts/{post.id}/comments/{comment.id}", json={"message": ""}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "Message is required"

    def test_missing_comment_is_server_error(self, client):
        """Should report an unknown comment through the store failure path."""
        # Arrange
        post = post_titled(store_of(client), "Post 1")
        missing = uuid4()

        # Act
        response = client.put(
            f"/posts/{post.id}/comments/{missing}", json={"message": "Hello"}
        )

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"] == f"Comment not found: {missing}"


class TestDeleteComment:
    """End-to-end tests for DELETE /posts/{post_id}/comments/{comment_id}."""

    def test_author_deletes_comment(self, client):
        """Should delete the comment so the post no longer lists it."""
        # Arrange
        post = post_titled(store_of(client), "Post 2")
        created = client.post(
            f"/posts/{post.id}/comments", json={"message": "Oops"}
        ).json()

        # Act
        response = client.delete(f"/posts/{post.id}/comments/{created['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"id": created["id"]}
        assert client.get(f"/posts/{post.id}").json()["comments"] == []

    def test_non_author_is_unauthorized(self, client):
        """Should refuse to delete another user's comment."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 2")
        comment = _sallys_comment(store, post.id)

        # Act
        response = client.delete(f"/posts/{post.id}/comments/{comment.id}")

        # Assert
        assert response.status_code == 401
        assert comment.id in store.comments


class TestToggleLike:
    """End-to-end tests for POST .../comments/{comment_id}/toggleLike."""

    def test_toggle_like_round_trip(self, client):
        """Should add a like, show it on the post, then remove it."""
        # Arrange
        store = store_of(client)
        post = post_titled(store, "Post 1")
        comment = _sallys_comment(store, post.id)
        url = f"/posts/{post.id}/comments/{comment.id}/toggleLike"

        # Act & Assert
        assert client.post(url).json() == {"addLike": True}
        listed = client.get(f"/posts/{post.id}").json()["comments"]
        assert listed[0]["likeCount"] == 1
        assert listed[0]["likedByMe"] is True

        assert client.post(url).json() == {"addLike": False}
        listed = client.get(f"/posts/{post.id}").json()["comments"]
        assert listed[0]["likeCount"] == 0
        assert listed[0]["likedByMe"] is False
