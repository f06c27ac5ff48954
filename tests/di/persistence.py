"""Mock persistence providers for testing."""

from dishka import Scope, provide

from redditclone.domain.repository import (
    PostRepository,
    SessionRepository,
    UserRepository,
)
from redditclone.persistence.bootstrap import InMemoryStorageBootstrap, StorageBootstrap
from redditclone.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)
from redditclone.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container.
    Every test builds its own container and starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_storage_bootstrap(self) -> StorageBootstrap:
        """Provide no-op bootstrap."""
        return InMemoryStorageBootstrap()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_session_repository(self) -> SessionRepository:
        """Provide in-memory session repository."""
        return InMemorySessionRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
