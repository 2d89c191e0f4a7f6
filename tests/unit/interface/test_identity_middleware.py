"""Unit tests for IdentityCookieMiddleware."""

from uuid import uuid4

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from blog.application.usecase.identity import CurrentUser
from blog.domain.value import UserId
from blog.interface.api.identity import IdentityCookieMiddleware

CURRENT_USER_ID = UserId(uuid4())


@pytest.fixture
def client():
    """An app that echoes back the cookies its route receives."""
    app = FastAPI()
    app.state.current_user = CurrentUser(user_id=CURRENT_USER_ID, name="John")
    app.add_middleware(IdentityCookieMiddleware)

    @app.get("/cookies")
    async def echo_cookies(request: Request) -> dict[str, str]:
        return dict(request.cookies)

    with TestClient(app) as test_client:
        yield test_client


class TestIdentityCookieMiddleware:
    """Tests for the request-side cookie rewrite."""

    def test_non_rfc_cookies_survive_the_rewrite(self, client):
        """A JSON-valued cookie must not cause the other cookies to be dropped."""
        # Act
        response = client.get(
            "/cookies",
            headers={"cookie": 'prefs={"a":1}; theme=dark; userId=bogus'},
        )

        # Assert
        cookies = response.json()
        assert cookies["userId"] == str(CURRENT_USER_ID)
        assert cookies["theme"] == "dark"
        assert cookies["prefs"] == '{"a":1}'

    def test_only_identity_cookie_is_replaced(self, client):
        """Unrelated cookies reach the route unchanged."""
        # Act
        response = client.get(
            "/cookies", headers={"cookie": "theme=dark; session=abc123"}
        )

        # Assert
        assert response.json() == {
            "theme": "dark",
            "session": "abc123",
            "userId": str(CURRENT_USER_ID),
        }

    def test_matching_cookie_passes_through(self, client):
        """No Set-Cookie headers when the cookie already names the current user."""
        # Act
        response = client.get(
            "/cookies", headers={"cookie": f"userId={CURRENT_USER_ID}"}
        )

        # Assert
        assert response.json() == {"userId": str(CURRENT_USER_ID)}
        assert response.headers.get_list("set-cookie") == []
