"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator
from datetime import timedelta

from dishka import Scope, provide
import logfire
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from redditclone.config import AuthSettings, Settings
from redditclone.domain.repository import (
    PostRepository,
    SessionRepository,
    UserRepository,
)
from redditclone.persistence.bootstrap import ProdStorageBootstrap, StorageBootstrap
from redditclone.persistence.database import create_engine, create_session_factory
from redditclone.persistence.mongo import (
    create_mongo_client,
    get_database,
    get_posts_collection,
)
from redditclone.persistence.repository import (
    MongoPostRepository,
    MySQLSessionRepository,
    MySQLUserRepository,
)
from redditclone.util.di.base import ProviderBase
from redditclone.util.observability import instrument_pymongo, instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using MySQL and MongoDB."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.APP)
    async def get_mongo_client(
        self, settings: Settings
    ) -> AsyncIterator[AsyncMongoClient]:
        """Provide MongoDB client, closed when the container closes."""
        instrument_pymongo()
        client = create_mongo_client(settings)
        yield client
        await client.close()

    @provide(scope=Scope.APP)
    def get_mongo_database(
        self, client: AsyncMongoClient, settings: Settings
    ) -> AsyncDatabase:
        """Provide the database holding the posts collection."""
        return get_database(client, settings)

    @provide(scope=Scope.APP)
    def get_storage_bootstrap(
        self, engine: AsyncEngine, database: AsyncDatabase
    ) -> StorageBootstrap:
        """Provide startup schema bootstrap."""
        return ProdStorageBootstrap(engine=engine, database=database)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return MySQLUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(
        self, session: AsyncSession, auth_settings: AuthSettings
    ) -> SessionRepository:
        """Provide Session repository."""
        return MySQLSessionRepository(
            session, ttl=timedelta(seconds=auth_settings.session_ttl_seconds)
        )

    @provide(scope=Scope.APP)
    def get_post_repository(self, database: AsyncDatabase) -> PostRepository:
        """Provide Post repository."""
        return MongoPostRepository(get_posts_collection(database))
