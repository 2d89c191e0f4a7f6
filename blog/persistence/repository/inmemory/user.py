"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_first_by_name(self, name: str) -> Optional[User]:
        """Find the user with the given name and the lowest id."""
        matches = [user for user in self._store.users.values() if user.name == name]
        return min(matches, key=lambda user: user.id, default=None)
