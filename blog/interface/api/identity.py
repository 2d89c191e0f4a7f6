"""Identity cookie handling.

The application has no login. Every request is attributed to the user
resolved at startup (``app.state.current_user``) by forcing the identity
cookie to that user's id before routing.
"""

import logfire
from fastapi import Request
from starlette.datastructures import MutableHeaders
from starlette.requests import HTTPConnection, cookie_parser
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class IdentityCookieMiddleware:
    """Pin the identity cookie to the current user.

    When the presented cookie is missing or names another user, the
    request's ``Cookie`` header is rewritten before the route sees it and
    the response gets two ``Set-Cookie`` headers: one clearing the cookie
    and one setting it to the current user's id. Requests that already
    carry the right cookie pass through untouched.
    """

    def __init__(self, app: ASGIApp, cookie_name: str = "userId") -> None:
        self.app = app
        self.cookie_name = cookie_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        current_user = scope["app"].state.current_user
        expected = str(current_user.user_id)
        presented = HTTPConnection(scope).cookies.get(self.cookie_name)

        if presented == expected:
            await self.app(scope, receive, send)
            return

        logfire.debug(
            "Correcting identity cookie", presented=presented, user_id=expected
        )
        scope = dict(scope)
        scope["headers"] = self._rewrite_cookie_header(scope["headers"], expected)
        set_cookie_headers = self._set_cookie_headers(expected)

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for value in set_cookie_headers:
                    headers.append("set-cookie", value)
            await send(message)

        await self.app(scope, receive, send_wrapper)

    def _rewrite_cookie_header(
        self, headers: list[tuple[bytes, bytes]], user_id: str
    ) -> list[tuple[bytes, bytes]]:
        # Same parser as Request.cookies, so non-RFC values survive
        values: dict[str, str] = {}
        kept = []
        for name, value in headers:
            if name == b"cookie":
                values.update(cookie_parser(value.decode("latin-1")))
            else:
                kept.append((name, value))

        values[self.cookie_name] = user_id
        cookie_header = "; ".join(f"{key}={value}" for key, value in values.items())
        kept.append((b"cookie", cookie_header.encode("latin-1")))
        return kept

    def _set_cookie_headers(self, user_id: str) -> list[str]:
        # Clear first, then set; the browser applies them in order
        response = Response()
        response.delete_cookie(self.cookie_name)
        response.set_cookie(self.cookie_name, user_id)
        return [
            value.decode("latin-1")
            for name, value in response.raw_headers
            if name == b"set-cookie"
        ]


def requesting_user_id(request: Request) -> str:
    """Read the (already corrected) identity cookie of the request."""
    return request.cookies[request.app.state.identity_cookie_name]
