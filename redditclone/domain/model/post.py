"""Post aggregate root.

A post owns its votes and comments. Score and upvote percentage are
derived from the vote list and recomputed on every vote change:

- score is the sum of all vote values
- upvote percentage is floor(100 * upvotes / votes), or 0 with no votes
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from redditclone.domain.error import NotFoundError
from redditclone.domain.model.comment import Comment
from redditclone.domain.model.common import DomainModel
from redditclone.domain.model.vote import UPVOTE, Vote
from redditclone.domain.value import Author, Category, PostId, PostType, UserId


def upvote_percentage(votes: list[Vote]) -> int:
    """Integer-truncated share of upvotes among all votes."""
    if not votes:
        return 0
    upvotes = sum(1 for v in votes if v.vote == UPVOTE)
    return 100 * upvotes // len(votes)


class Post(DomainModel):
    """Post aggregate root.

    Text posts carry text and link posts carry a URL, never both.
    The id is None until the repository stores the post. The revision
    counter increases with every vote write and guards conditional
    updates in storage.
    """

    id: Optional[PostId] = None
    type: PostType
    title: str
    category: Category
    text: Optional[str] = None
    url: Optional[str] = None
    author: Author
    score: int = 1
    views: int = Field(default=0, ge=0)
    upvote_percentage: int = Field(default=100, ge=0, le=100)
    votes: list[Vote] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created: datetime
    revision: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_post_type_content(self) -> "Post":
        """Validate that text or URL is provided based on post type."""
        if self.type.requires_text and (not self.text or self.url):
            raise ValueError("text posts require text and no url")
        if self.type.requires_url and (not self.url or self.text):
            raise ValueError("link posts require url and no text")
        return self

    def find_vote(self, user_id: UserId) -> Optional[Vote]:
        """Return the user's vote on this post, if any."""
        return next((v for v in self.votes if v.user == user_id), None)

    def with_vote(self, vote: Vote) -> "Post":
        """Return a copy with the vote applied.

        An existing vote by the same user is replaced in place and the
        score moves by the difference; otherwise the vote is appended.
        """
        previous = self.find_vote(vote.user)
        if previous is not None:
            votes = [vote if v.user == vote.user else v for v in self.votes]
            score = self.score + vote.vote - previous.vote
        else:
            votes = [*self.votes, vote]
            score = self.score + vote.vote

        return self.model_copy(
            update={
                "votes": votes,
                "score": score,
                "upvote_percentage": upvote_percentage(votes),
            }
        )

    def without_vote(self, user_id: UserId) -> "Post":
        """Return a copy with the user's vote removed.

        Raises:
            NotFoundError: If the user has not voted on this post
        """
        previous = self.find_vote(user_id)
        if previous is None:
            raise NotFoundError("vote", user_id)

        votes = [v for v in self.votes if v.user != user_id]
        return self.model_copy(
            update={
                "votes": votes,
                "score": self.score - previous.vote,
                "upvote_percentage": upvote_percentage(votes),
            }
        )
