"""In-memory session repository for testing."""

from datetime import datetime, timedelta, timezone

from redditclone.domain.model.session import Session
from redditclone.domain.repository.session import SESSION_TTL, SessionRepository
from redditclone.domain.value import SessionId, UserId


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self, ttl: timedelta = SESSION_TTL) -> None:
        self.ttl = ttl
        self._sessions: dict[SessionId, Session] = {}

    async def create(self, user_id: UserId, session_id: SessionId) -> Session:
        """Store a session expiring one TTL from now."""
        now = datetime.now(timezone.utc)
        session = Session(
            id=session_id,
            user_id=user_id,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self._sessions[session_id] = session
        return session

    async def is_valid(self, user_id: UserId) -> bool:
        """Check for any unexpired session of the user."""
        now = datetime.now(timezone.utc)
        return any(
            s.user_id == user_id and s.is_active(now) for s in self._sessions.values()
        )

    async def invalidate(self, user_id: UserId) -> None:
        """Delete all sessions of the user."""
        self._sessions = {
            sid: s for sid, s in self._sessions.items() if s.user_id != user_id
        }
