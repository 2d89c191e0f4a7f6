"""Identity use cases."""

from .resolve_current_user import (
    CurrentUser,
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)

__all__ = [
    "CurrentUser",
    "ResolveCurrentUserRequest",
    "ResolveCurrentUserUseCase",
]
