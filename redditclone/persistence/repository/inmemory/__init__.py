"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .session import InMemorySessionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemorySessionRepository",
    "InMemoryUserRepository",
]
