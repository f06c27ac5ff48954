"""Vote value embedded in a post."""

from typing import Literal

from redditclone.domain.model.common import DomainModel
from redditclone.domain.value import UserId

UPVOTE = 1
DOWNVOTE = -1


class Vote(DomainModel):
    """One user's vote on a post. At most one per user per post."""

    user: UserId
    vote: Literal[1, -1]
