"""MySQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from redditclone.domain.error import AlreadyExistsError
from redditclone.domain.model import User
from redditclone.domain.repository import UserRepository
from redditclone.persistence.mappers import row_to_user, user_to_dict
from redditclone.persistence.tables import users_table


class MySQLUserRepository(UserRepository):
    """MySQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """Insert a user.

        Committed before returning so the user is visible to the next
        request. A unique violation rolls the transaction back.

        Args:
            user: User to insert

        Returns:
            Inserted user

        Raises:
            AlreadyExistsError: If the username is taken
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logfire.warn("Duplicate username", username=user.username, error=str(e))
            raise AlreadyExistsError("user") from e
        return user

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: Username to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None
