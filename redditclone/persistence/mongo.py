"""MongoDB client management for the post store."""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from redditclone.config import Settings

POSTS_COLLECTION = "posts"


def create_mongo_client(settings: Settings) -> AsyncMongoClient:
    """Create the MongoDB client.

    Datetimes are decoded as timezone-aware UTC values.

    Args:
        settings: Application settings with the Mongo URI

    Returns:
        Async MongoDB client
    """
    return AsyncMongoClient(settings.mongo_uri, tz_aware=True)


def get_database(client: AsyncMongoClient, settings: Settings) -> AsyncDatabase:
    """Select the database holding the posts collection."""
    return client[settings.mongo_db_name]


def get_posts_collection(database: AsyncDatabase) -> AsyncCollection:
    """Return the posts collection."""
    return database[POSTS_COLLECTION]
