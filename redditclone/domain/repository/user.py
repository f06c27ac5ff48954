"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from redditclone.domain.model.user import User


class UserRepository(ABC):
    """Repository for User aggregate.

    Users are created once and never updated or deleted.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Store a new user.

        Args:
            user: The user to store

        Returns:
            The stored user

        Raises:
            AlreadyExistsError: If the username is taken
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The unique username

        Returns:
            The user if found, None otherwise
        """
        pass
