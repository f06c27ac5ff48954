"""MongoDB implementation of Post repository.

Each post is one document in the posts collection with its votes and
comments embedded. Views and comments change through atomic update
operators. Vote changes are read-modify-write guarded by the document's
revision counter and retried when another writer got there first.
"""

from typing import Any, Callable, Dict, List

import logfire
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from redditclone.domain.error import (
    AlreadyExistsError,
    ConcurrentUpdateError,
    InvalidIdentifierError,
    NotFoundError,
)
from redditclone.domain.model import Comment, Post, Vote
from redditclone.domain.repository import MAX_VOTE_ATTEMPTS, PostRepository
from redditclone.domain.value import Category, CommentId, PostId, UserId
from redditclone.persistence.mappers import (
    comment_to_document,
    document_to_post,
    post_to_document,
    vote_to_document,
)


def to_object_id(post_id: str) -> ObjectId:
    """Parse a post id into an ObjectId.

    Raises:
        InvalidIdentifierError: If the id is not 24 hex characters
    """
    if not ObjectId.is_valid(post_id):
        raise InvalidIdentifierError(post_id)
    return ObjectId(post_id)


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository."""

    def __init__(self, collection: AsyncCollection) -> None:
        """Initialize repository with the posts collection.

        Args:
            collection: Async posts collection
        """
        self.collection = collection

    async def create(self, post: Post) -> Post:
        """Insert a post and return it with the assigned id.

        Args:
            post: Post to insert

        Returns:
            Inserted post

        Raises:
            AlreadyExistsError: If the id is already taken
        """
        try:
            result = await self.collection.insert_one(post_to_document(post))
        except DuplicateKeyError as e:
            raise AlreadyExistsError("post") from e
        return post.model_copy(update={"id": PostId(str(result.inserted_id))})

    async def get_by_id(self, post_id: PostId) -> Post:
        """Increment views and return the post after the increment.

        Args:
            post_id: Post ID

        Returns:
            Post with the new view count

        Raises:
            InvalidIdentifierError: If the id is malformed
            NotFoundError: If no post has the id
        """
        document = await self.collection.find_one_and_update(
            {"_id": to_object_id(post_id)},
            {"$inc": {"views": 1}},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise NotFoundError("post", post_id)
        return document_to_post(document)

    async def _find(self, query: Dict[str, Any], sort: bool = False) -> List[Post]:
        """Run a query, logging and returning no posts on storage errors."""
        try:
            cursor = self.collection.find(query)
            if sort:
                cursor = cursor.sort("score", DESCENDING)
            return [document_to_post(document) async for document in cursor]
        except PyMongoError as e:
            logfire.error("Post query failed", query=str(query), error=str(e))
            return []

    async def find_all(self) -> List[Post]:
        """Find all posts, highest score first."""
        return await self._find({}, sort=True)

    async def find_by_author(self, username: str) -> List[Post]:
        """Find posts whose author has the username."""
        return await self._find({"author.username": username})

    async def find_by_category(self, category: Category) -> List[Post]:
        """Find posts in the category."""
        return await self._find({"category": category.value})

    async def delete(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            InvalidIdentifierError: If the id is malformed
            NotFoundError: If no post has the id
        """
        result = await self.collection.delete_one({"_id": to_object_id(post_id)})
        if result.deleted_count == 0:
            raise NotFoundError("post", post_id)

    async def add_comment(self, post_id: PostId, comment: Comment) -> Post:
        """Push a comment with a fresh id onto the post.

        Args:
            post_id: Post ID
            comment: Comment without an id

        Returns:
            Updated post
        """
        object_id = to_object_id(post_id)
        stored = comment.model_copy(update={"id": CommentId(str(ObjectId()))})
        document = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$push": {"comments": comment_to_document(stored)}},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise NotFoundError("post", post_id)
        return document_to_post(document)

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> Post:
        """Pull every comment with the id from the post.

        Args:
            post_id: Post ID
            comment_id: Comment ID

        Returns:
            Updated post, unchanged if the comment did not exist
        """
        document = await self.collection.find_one_and_update(
            {"_id": to_object_id(post_id)},
            {"$pull": {"comments": {"id": comment_id}}},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise NotFoundError("post", post_id)
        return document_to_post(document)

    async def add_vote(self, post_id: PostId, vote: Vote) -> Post:
        """Cast or replace the voter's vote."""
        return await self._update_votes(post_id, lambda post: post.with_vote(vote))

    async def cancel_vote(self, post_id: PostId, user_id: UserId) -> Post:
        """Withdraw the user's vote."""
        return await self._update_votes(
            post_id, lambda post: post.without_vote(user_id)
        )

    async def _update_votes(
        self, post_id: PostId, change: Callable[[Post], Post]
    ) -> Post:
        """Apply a vote change with a revision-checked conditional write.

        Only the vote-derived fields are written, so concurrent view and
        comment updates are never overwritten.

        Args:
            post_id: Post ID
            change: Pure function computing the new aggregate

        Returns:
            Updated post

        Raises:
            ConcurrentUpdateError: If every attempt lost to another writer
        """
        object_id = to_object_id(post_id)

        for attempt in range(1, MAX_VOTE_ATTEMPTS + 1):
            document = await self.collection.find_one({"_id": object_id})
            if document is None:
                raise NotFoundError("post", post_id)

            current = document_to_post(document)
            updated = change(current)

            # None matches documents stored before revisions existed
            expected = document.get("revision")
            result = await self.collection.update_one(
                {"_id": object_id, "revision": expected},
                {
                    "$set": {
                        "votes": [vote_to_document(v) for v in updated.votes],
                        "score": updated.score,
                        "upvote_percentage": updated.upvote_percentage,
                    },
                    "$inc": {"revision": 1},
                },
            )
            if result.modified_count == 1:
                return updated.model_copy(update={"revision": current.revision + 1})

            logfire.warn(
                "Vote write conflict, retrying", post_id=post_id, attempt=attempt
            )

        raise ConcurrentUpdateError("post", post_id)
