"""In-memory post repository for testing."""

from bson import ObjectId

from redditclone.domain.error import (
    AlreadyExistsError,
    InvalidIdentifierError,
    NotFoundError,
)
from redditclone.domain.model.comment import Comment
from redditclone.domain.model.post import Post
from redditclone.domain.model.vote import Vote
from redditclone.domain.repository.post import PostRepository
from redditclone.domain.value import Category, CommentId, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Ids use the same ObjectId hex form as the MongoDB store. Insertion
    order is kept so listings are stable.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _get(self, post_id: PostId) -> Post:
        if not ObjectId.is_valid(post_id):
            raise InvalidIdentifierError(post_id)
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("post", post_id)
        return post

    async def create(self, post: Post) -> Post:
        """Store a post under a new id."""
        post_id = post.id or PostId(str(ObjectId()))
        if post_id in self._posts:
            raise AlreadyExistsError("post")
        stored = post.model_copy(update={"id": post_id})
        self._posts[post_id] = stored
        return stored

    async def get_by_id(self, post_id: PostId) -> Post:
        """Increment views and return the post."""
        post = self._get(post_id)
        viewed = post.model_copy(update={"views": post.views + 1})
        self._posts[post_id] = viewed
        return viewed

    async def find_all(self) -> list[Post]:
        """Find all posts, highest score first."""
        return sorted(self._posts.values(), key=lambda p: p.score, reverse=True)

    async def find_by_author(self, username: str) -> list[Post]:
        """Find posts by author username."""
        return [p for p in self._posts.values() if p.author.username == username]

    async def find_by_category(self, category: Category) -> list[Post]:
        """Find posts in a category."""
        return [p for p in self._posts.values() if p.category == category]

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._get(post_id)
        del self._posts[post_id]

    async def add_comment(self, post_id: PostId, comment: Comment) -> Post:
        """Append a comment under a new id."""
        post = self._get(post_id)
        stored = comment.model_copy(update={"id": CommentId(str(ObjectId()))})
        updated = post.model_copy(update={"comments": [*post.comments, stored]})
        self._posts[post_id] = updated
        return updated

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> Post:
        """Remove comments with the id; a no-op if there are none."""
        post = self._get(post_id)
        updated = post.model_copy(
            update={"comments": [c for c in post.comments if c.id != comment_id]}
        )
        self._posts[post_id] = updated
        return updated

    async def add_vote(self, post_id: PostId, vote: Vote) -> Post:
        """Cast or replace the voter's vote."""
        post = self._get(post_id)
        updated = post.with_vote(vote)
        return self._bump(updated)

    async def cancel_vote(self, post_id: PostId, user_id: UserId) -> Post:
        """Withdraw the user's vote."""
        post = self._get(post_id)
        updated = post.without_vote(user_id)
        return self._bump(updated)

    def _bump(self, post: Post) -> Post:
        stored = post.model_copy(update={"revision": post.revision + 1})
        self._posts[stored.id] = stored
        return stored
