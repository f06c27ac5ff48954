"""MySQL implementation of Session repository.

Writes commit immediately: the next request must see a new or revoked
session even though the request scope closes after the response is sent.
"""

from datetime import datetime, timedelta, timezone

import logfire
from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from redditclone.domain.error import SessionCreationError
from redditclone.domain.model import Session
from redditclone.domain.repository import SESSION_TTL, SessionRepository
from redditclone.domain.value import SessionId, UserId
from redditclone.persistence.mappers import session_to_dict
from redditclone.persistence.tables import sessions_table


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DATETIME columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MySQLSessionRepository(SessionRepository):
    """MySQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession, ttl: timedelta = SESSION_TTL) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            ttl: Lifetime of new login sessions
        """
        self.session = session
        self.ttl = ttl

    async def create(self, user_id: UserId, session_id: SessionId) -> Session:
        """Insert a session expiring one TTL from now.

        Args:
            user_id: Session owner
            session_id: Session identifier

        Returns:
            Inserted session

        Raises:
            SessionCreationError: If the row cannot be written
        """
        now = utcnow()
        login_session = Session(
            id=session_id,
            user_id=user_id,
            created_at=now,
            expires_at=now + self.ttl,
        )
        stmt = sessions_table.insert().values(**session_to_dict(login_session))
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.warn("Session insert failed", user_id=user_id, error=str(e))
            raise SessionCreationError() from e
        return login_session

    async def is_valid(self, user_id: UserId) -> bool:
        """Check for any unexpired session of the user.

        Args:
            user_id: User to check

        Returns:
            True if a session expires after now
        """
        stmt = select(
            exists().where(
                sessions_table.c.user_id == user_id,
                sessions_table.c.expires_at > utcnow(),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def invalidate(self, user_id: UserId) -> None:
        """Delete all sessions of the user.

        Args:
            user_id: User to log out
        """
        stmt = sessions_table.delete().where(sessions_table.c.user_id == user_id)
        await self.session.execute(stmt)
        await self.session.commit()
