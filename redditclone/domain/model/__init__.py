"""Domain model entities."""

from redditclone.domain.model.comment import Comment
from redditclone.domain.model.post import Post
from redditclone.domain.model.session import Session
from redditclone.domain.model.user import User
from redditclone.domain.model.vote import DOWNVOTE, UPVOTE, Vote

__all__ = [
    "User",
    "Session",
    "Post",
    "Comment",
    "Vote",
    "UPVOTE",
    "DOWNVOTE",
]
