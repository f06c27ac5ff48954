"""Mappers between storage records and domain models.

Domain models are immutable pydantic models, so rows and documents are
mapped by hand rather than through an ORM or ODM.
"""

from typing import Any, Dict

from bson import ObjectId

from redditclone.domain.model import Comment, Post, Session, User, Vote
from redditclone.domain.value import (
    Author,
    Category,
    CommentId,
    PostId,
    PostType,
    SessionId,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert a users row to a User domain model."""
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        password_hash=row["password"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert a User domain model to a users row."""
    return {
        "id": user.id,
        "username": user.username,
        "password": user.password_hash,
    }


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert a sessions row to a Session domain model."""
    return Session(
        id=SessionId(row["id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert a Session domain model to a sessions row."""
    return session.model_dump()


def comment_to_document(comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to its embedded document form."""
    return {
        "id": comment.id,
        "created": comment.created,
        "author": comment.author.model_dump(),
        "body": comment.body,
    }


def vote_to_document(vote: Vote) -> Dict[str, Any]:
    """Convert a Vote to its embedded document form."""
    return {"user": vote.user, "vote": vote.vote}


def post_to_document(post: Post) -> Dict[str, Any]:
    """Convert a Post to a posts document.

    The _id is left for the store to assign unless the post has one.
    Absent text or url fields are omitted.

    Args:
        post: Post domain model

    Returns:
        Document suitable for insertion
    """
    document: Dict[str, Any] = {
        "type": post.type.value,
        "title": post.title,
        "category": post.category.value,
        "author": post.author.model_dump(),
        "score": post.score,
        "views": post.views,
        "upvote_percentage": post.upvote_percentage,
        "votes": [vote_to_document(v) for v in post.votes],
        "comments": [comment_to_document(c) for c in post.comments],
        "created": post.created,
        "revision": post.revision,
    }
    if post.id is not None:
        document["_id"] = ObjectId(post.id)
    if post.text is not None:
        document["text"] = post.text
    if post.url is not None:
        document["url"] = post.url
    return document


def document_to_post(document: Dict[str, Any]) -> Post:
    """Convert a posts document to a Post domain model.

    Args:
        document: Document as returned by the driver

    Returns:
        Post domain model with the hex form of _id as its id
    """
    return Post(
        id=PostId(str(document["_id"])),
        type=PostType(document["type"]),
        title=document["title"],
        category=Category(document["category"]),
        text=document.get("text"),
        url=document.get("url"),
        author=Author(**document["author"]),
        score=document["score"],
        views=document["views"],
        upvote_percentage=document["upvote_percentage"],
        votes=[
            Vote(user=UserId(v["user"]), vote=v["vote"])
            for v in document.get("votes") or []
        ],
        comments=[
            Comment(
                id=CommentId(c["id"]),
                created=c["created"],
                author=Author(**c["author"]),
                body=c["body"],
            )
            for c in document.get("comments") or []
        ],
        created=document["created"],
        revision=document.get("revision", 0),
    )
