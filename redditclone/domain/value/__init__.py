"""Domain value objects."""

from redditclone.domain.value.identifiers import (
    ID_LENGTH,
    CommentId,
    PostId,
    SessionId,
    UserId,
)
from redditclone.domain.value.types import Author, Category, PostType, VoteAction

__all__ = [
    # Identifiers
    "ID_LENGTH",
    "UserId",
    "SessionId",
    "PostId",
    "CommentId",
    # Types
    "Author",
    "Category",
    "PostType",
    "VoteAction",
]
