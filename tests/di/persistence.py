"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.config import IdentitySettings
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so every request served by one container sees
    the same data; each test builds its own container and so starts from
    a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self, identity: IdentitySettings) -> InMemoryStore:
        """Provide a store seeded like a freshly migrated database."""
        store = InMemoryStore()
        store.add_user(identity.current_user_name)
        store.add_user("Sally")
        store.add_post("Post 1", "First sample post")
        store.add_post("Post 2", "Second sample post")
        return store

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(store)
