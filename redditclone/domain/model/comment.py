"""Comment value embedded in a post."""

from datetime import datetime
from typing import Optional

from redditclone.domain.model.common import DomainModel
from redditclone.domain.value import Author, CommentId


class Comment(DomainModel):
    """Comment on a post.

    The id is assigned by the post repository when the comment is
    appended, so new comments are built without one.
    """

    id: Optional[CommentId] = None
    created: datetime
    author: Author
    body: str
