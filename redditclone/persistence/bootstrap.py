"""Schema bootstrap run at application startup.

The relational tables are created from the SQLAlchemy metadata and the
posts collection gets its query indexes. Both steps are idempotent.
"""

from abc import ABC, abstractmethod

import logfire
from pymongo import ASCENDING, DESCENDING
from pymongo.asynchronous.database import AsyncDatabase
from sqlalchemy.ext.asyncio import AsyncEngine

from redditclone.persistence.mongo import get_posts_collection
from redditclone.persistence.tables import metadata


class StorageBootstrap(ABC):
    """Prepares storage before the first request is served."""

    @abstractmethod
    async def apply(self) -> None:
        pass


class ProdStorageBootstrap(StorageBootstrap):
    """Creates MySQL tables and MongoDB indexes."""

    def __init__(self, engine: AsyncEngine, database: AsyncDatabase) -> None:
        """Initialize bootstrap.

        Args:
            engine: Engine for the relational store
            database: Database holding the posts collection
        """
        self.engine = engine
        self.database = database

    async def apply(self) -> None:
        """Create missing tables and indexes."""
        with logfire.span("storage_bootstrap.apply"):
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
            logfire.info("Relational schema applied", tables=list(metadata.tables))

            posts = get_posts_collection(self.database)
            await posts.create_index([("score", DESCENDING)])
            await posts.create_index([("author.username", ASCENDING)])
            await posts.create_index([("category", ASCENDING)])
            logfire.info("Post indexes ensured")


class InMemoryStorageBootstrap(StorageBootstrap):
    """In-memory repositories need no preparation."""

    async def apply(self) -> None:
        pass
