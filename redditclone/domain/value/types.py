"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from redditclone.domain.value.common import ValueObject
from redditclone.domain.value.identifiers import UserId


class PostType(str, Enum):
    """Kind of post content."""

    TEXT = "text"
    LINK = "link"

    @property
    def requires_text(self) -> bool:
        return self == PostType.TEXT

    @property
    def requires_url(self) -> bool:
        return self == PostType.LINK


class Category(str, Enum):
    """Closed set of post categories."""

    MUSIC = "music"
    FUNNY = "funny"
    VIDEOS = "videos"
    PROGRAMMING = "programming"
    NEWS = "news"
    FASHION = "fashion"


class VoteAction(str, Enum):
    """Vote action named in the request path."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    UNVOTE = "unvote"


class Author(ValueObject):
    """User reference embedded in posts and comments.

    Captured at creation time; later changes to the user record are not
    reflected here.
    """

    id: UserId
    username: str = Field(min_length=1)
