"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import User


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_first_by_name(self, name: str) -> Optional[User]:
        """Find the first user with the given name.

        Names are not unique; the store's natural order decides which
        match is returned.

        Args:
            name: Display name to match exactly

        Returns:
            The first matching user, None if nobody has that name
        """
        pass
