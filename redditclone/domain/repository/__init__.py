"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from redditclone.domain.repository.post import MAX_VOTE_ATTEMPTS, PostRepository
from redditclone.domain.repository.session import SESSION_TTL, SessionRepository
from redditclone.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SessionRepository",
    "PostRepository",
    "MAX_VOTE_ATTEMPTS",
    "SESSION_TTL",
]
