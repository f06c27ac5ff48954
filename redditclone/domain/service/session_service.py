"""Session domain service."""

import logfire

from redditclone.domain.error import SessionCreationError
from redditclone.domain.model import Session
from redditclone.domain.repository import SessionRepository
from redditclone.domain.value import SessionId, UserId
from redditclone.util.ids import generate_id

from .base import Service


class SessionService(Service):
    """Domain service for login sessions."""

    def __init__(self, session_repository: SessionRepository) -> None:
        """Initialize session service.

        Args:
            session_repository: Session repository
        """
        self.session_repository = session_repository

    async def open_session(self, user_id: UserId) -> Session:
        """Open a new session for the user.

        Args:
            user_id: The user logging in

        Returns:
            The new session

        Raises:
            SessionCreationError: If the session cannot be stored
        """
        session_id = SessionId(generate_id())
        with logfire.span("session_service.open_session", user_id=user_id):
            try:
                session = await self.session_repository.create(user_id, session_id)
            except SessionCreationError:
                logfire.error("Session creation failed", user_id=user_id)
                raise

            logfire.info("Session opened", user_id=user_id, session_id=session.id)
            return session

    async def is_active(self, user_id: UserId) -> bool:
        """Check whether the user holds any unexpired session."""
        return await self.session_repository.is_valid(user_id)

    async def invalidate(self, user_id: UserId) -> None:
        """Close every session of the user."""
        with logfire.span("session_service.invalidate", user_id=user_id):
            await self.session_repository.invalidate(user_id)
            logfire.info("Sessions invalidated", user_id=user_id)
