"""Response models shared by post, comment and vote use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from redditclone.domain.model import Comment, Post, Vote
from redditclone.domain.value import Author


class AuthorResponse(BaseModel):
    """Embedded author."""

    id: str
    username: str

    @classmethod
    def from_domain(cls, author: Author) -> "AuthorResponse":
        return cls(id=author.id, username=author.username)


class VoteResponse(BaseModel):
    """Embedded vote."""

    user: str
    vote: int

    @classmethod
    def from_domain(cls, vote: Vote) -> "VoteResponse":
        return cls(user=vote.user, vote=vote.vote)


class CommentResponse(BaseModel):
    """Embedded comment."""

    id: str
    created: datetime
    author: AuthorResponse
    body: str

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id or "",
            created=comment.created,
            author=AuthorResponse.from_domain(comment.author),
            body=comment.body,
        )


class PostResponse(BaseModel):
    """Post as sent to clients.

    text and url are optional and left out when absent; comments is
    always a list, possibly empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    score: int
    views: int
    type: str
    title: str
    author: AuthorResponse
    category: str
    text: Optional[str] = None
    url: Optional[str] = None
    votes: list[VoteResponse]
    comments: list[CommentResponse]
    created: datetime
    upvote_percentage: int = Field(alias="upvotePercentage")

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        """Build the wire form of a stored post."""
        return cls(
            id=post.id or "",
            score=post.score,
            views=post.views,
            type=post.type.value,
            title=post.title,
            author=AuthorResponse.from_domain(post.author),
            category=post.category.value,
            text=post.text,
            url=post.url,
            votes=[VoteResponse.from_domain(v) for v in post.votes],
            comments=[CommentResponse.from_domain(c) for c in post.comments],
            created=post.created,
            upvote_percentage=post.upvote_percentage,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
