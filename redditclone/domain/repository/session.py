"""Session repository interface."""

from abc import ABC, abstractmethod
from datetime import timedelta

from redditclone.domain.model.session import Session
from redditclone.domain.value import SessionId, UserId

SESSION_TTL = timedelta(hours=1)


class SessionRepository(ABC):
    """Repository for login sessions."""

    @abstractmethod
    async def create(self, user_id: UserId, session_id: SessionId) -> Session:
        """Open a session that expires one TTL from now.

        Args:
            user_id: Owner of the session
            session_id: New session identifier

        Returns:
            The stored session

        Raises:
            SessionCreationError: If the store cannot persist the session
        """
        pass

    @abstractmethod
    async def is_valid(self, user_id: UserId) -> bool:
        """Check whether the user has any unexpired session.

        Args:
            user_id: The user to check

        Returns:
            True if at least one session expires in the future
        """
        pass

    @abstractmethod
    async def invalidate(self, user_id: UserId) -> None:
        """Delete every session of the user.

        Args:
            user_id: The user to log out
        """
        pass
