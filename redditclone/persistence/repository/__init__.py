"""Storage-backed repository implementations."""

from redditclone.persistence.repository.post import MongoPostRepository
from redditclone.persistence.repository.session import MySQLSessionRepository
from redditclone.persistence.repository.user import MySQLUserRepository

__all__ = [
    "MySQLUserRepository",
    "MySQLSessionRepository",
    "MongoPostRepository",
]
