"""Resolve current user use case."""

import logfire
from pydantic import BaseModel, ConfigDict

from blog.domain.error import IdentityBootstrapError
from blog.domain.service import UserService
from blog.domain.value import UserId


class CurrentUser(BaseModel):
    """The single identity every request is attributed to.

    Resolved once at startup and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    name: str


class ResolveCurrentUserRequest(BaseModel):
    """Resolve current user request."""

    name: str


class ResolveCurrentUserUseCase:
    """Use case for bootstrapping the fixed current user by name."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize resolve current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ResolveCurrentUserRequest) -> CurrentUser:
        """Look up the configured user.

        Store failures propagate: the process cannot serve traffic
        without a current user.

        Args:
            request: Name of the user to act as

        Returns:
            The resolved current user

        Raises:
            IdentityBootstrapError: If no user has that name
        """
        user = await self.user_service.find_by_name(request.name)
        if user is None:
            raise IdentityBootstrapError(request.name)

        logfire.info("Current user resolved", user_id=str(user.id), name=user.name)
        return CurrentUser(user_id=user.id, name=user.name)
