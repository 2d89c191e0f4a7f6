"""User domain service."""

import logfire

from blog.domain.model.user import User
from blog.domain.repository import UserRepository

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_name(self, name: str) -> User | None:
        """Find the first user with the given name.

        Args:
            name: User name

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_name", name=name):
            user = await self.user_repository.find_first_by_name(name)

            if user:
                logfire.info("User found", user_id=str(user.id), name=name)
            else:
                logfire.warn("User not found", name=name)

            return user
