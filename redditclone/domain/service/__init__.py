"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .session_service import SessionService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "PostService",
    "Service",
    "SessionService",
    "UserService",
    "VoteService",
]
