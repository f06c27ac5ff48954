"""User domain service."""

import asyncio

import logfire

from redditclone.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from redditclone.domain.model import User
from redditclone.domain.repository import UserRepository
from redditclone.domain.value import UserId
from redditclone.util.ids import generate_id
from redditclone.util.password import hash_password, verify_password

from .base import Service
from .session_service import SessionService


class UserService(Service):
    """Domain service for registration, login and logout.

    Password hashing is CPU-bound and runs in a worker thread.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        session_service: SessionService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            session_service: Session domain service
        """
        self.user_repository = user_repository
        self.session_service = session_service

    async def register(self, username: str, password: str) -> User:
        """Create a user and open a session for them.

        Args:
            username: Desired username
            password: Plain text password

        Returns:
            The new user

        Raises:
            AlreadyExistsError: If the username is taken
            SessionCreationError: If the session cannot be stored
        """
        with logfire.span("user_service.register", username=username):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Registration with taken username", username=username)
                raise AlreadyExistsError("user")

            password_hash = await asyncio.to_thread(hash_password, password)
            user = User(
                id=UserId(generate_id()),
                username=username,
                password_hash=password_hash,
            )
            saved = await self.user_repository.create(user)

            await self.session_service.open_session(saved.id)
            logfire.info("User registered", user_id=saved.id, username=username)
            return saved

    async def login(self, username: str, password: str) -> User:
        """Check credentials and open a session.

        Args:
            username: Username
            password: Plain text password

        Returns:
            The authenticated user

        Raises:
            NotFoundError: If no user has that username
            InvalidCredentialsError: If the password does not match
            SessionCreationError: If the session cannot be stored
        """
        with logfire.span("user_service.login", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("Login for unknown user", username=username)
                raise NotFoundError("user", username)

            matches = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not matches:
                logfire.warn("Login with wrong password", user_id=user.id)
                raise InvalidCredentialsError()

            await self.session_service.open_session(user.id)
            logfire.info("User logged in", user_id=user.id)
            return user

    async def logout(self, user_id: UserId) -> None:
        """Invalidate every session of the user.

        Args:
            user_id: The user logging out
        """
        await self.session_service.invalidate(user_id)
