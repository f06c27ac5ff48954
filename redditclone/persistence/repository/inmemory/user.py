"""In-memory user repository for testing."""

from typing import Optional

from redditclone.domain.error import AlreadyExistsError
from redditclone.domain.model.user import User
from redditclone.domain.repository.user import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def create(self, user: User) -> User:
        """Store a user, rejecting taken usernames."""
        if user.username in self._users:
            raise AlreadyExistsError("user")
        self._users[user.username] = user
        return user

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        return self._users.get(username)
