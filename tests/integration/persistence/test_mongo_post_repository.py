"""Integration tests for the MongoDB post repository.

The repository runs against mongomock behind a thin async adapter, so
the real query and update documents are evaluated without a server.
"""

from datetime import datetime, timezone

import mongomock
import pytest

from redditclone.domain.error import ConcurrentUpdateError, NotFoundError
from redditclone.domain.model import Comment, Post, Vote
from redditclone.domain.model.vote import DOWNVOTE, UPVOTE
from redditclone.domain.repository import MAX_VOTE_ATTEMPTS
from redditclone.domain.value import Author, Category, PostId, PostType, UserId
from redditclone.persistence.mappers import post_to_document
from redditclone.persistence.repository import MongoPostRepository

ALICE = Author(id=UserId("a" * 24), username="alice")
BOB = Author(id=UserId("b" * 24), username="bob")


class AsyncCursor:
    """Async iteration over a mongomock cursor."""

    def __init__(self, cursor):
        self.cursor = cursor

    def sort(self, key, direction):
        self.cursor = self.cursor.sort(key, direction)
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self.cursor:
            yield document


class AsyncCollection:
    """Awaitable facade over a synchronous mongomock collection."""

    def __init__(self, collection):
        self.sync = collection
        self.reads = 0

    async def insert_one(self, document):
        return self.sync.insert_one(document)

    async def find_one(self, query):
        self.reads += 1
        return self.sync.find_one(query)

    async def find_one_and_update(self, query, update, return_document):
        return self.sync.find_one_and_update(
            query, update, return_document=return_document
        )

    async def update_one(self, query, update):
        return self.sync.update_one(query, update)

    async def delete_one(self, query):
        return self.sync.delete_one(query)

    def find(self, query):
        return AsyncCursor(self.sync.find(query))


class RacingCollection(AsyncCollection):
    """Collection where another writer bumps the revision before some writes."""

    def __init__(self, collection, conflicts):
        super().__init__(collection)
        self.conflicts = conflicts

    async def update_one(self, query, update):
        if self.conflicts > 0:
            self.conflicts -= 1
            self.sync.update_one({"_id": query["_id"]}, {"$inc": {"revision": 1}})
        return await super().update_one(query, update)


@pytest.fixture
def posts():
    return mongomock.MongoClient().db.posts


@pytest.fixture
def collection(posts):
    return AsyncCollection(posts)


@pytest.fixture
def repo(collection):
    return MongoPostRepository(collection)


def new_post(**overrides) -> Post:
    fields = dict(
        type=PostType.TEXT,
        title="Hello",
        category=Category.MUSIC,
        text="first post",
        author=ALICE,
        votes=[Vote(user=ALICE.id, vote=UPVOTE)],
        created=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return Post(**fields)


class TestPostStorage:
    """Tests for inserts, reads and deletes."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, repo, posts):
        post = await repo.create(new_post())

        assert post.id is not None
        assert len(post.id) == 24
        assert posts.count_documents({}) == 1

    @pytest.mark.asyncio
    async def test_get_increments_views(self, repo):
        post = await repo.create(new_post())

        await repo.get_by_id(post.id)
        fetched = await repo.get_by_id(post.id)

        assert fetched.views == 2

    @pytest.mark.asyncio
    async def test_get_missing(self, repo):
        with pytest.raises(NotFoundError):
            await repo.get_by_id(PostId("0" * 24))

    @pytest.mark.asyncio
    async def test_find_all_by_score(self, repo):
        # Arrange
        low = await repo.create(new_post(title="low", score=-3))
        high = await repo.create(new_post(title="high", score=7))
        mid = await repo.create(new_post(title="mid"))

        # Act
        listed = await repo.find_all()

        # Assert
        assert [p.id for p in listed] == [high.id, mid.id, low.id]

    @pytest.mark.asyncio
    async def test_filters(self, repo):
        await repo.create(new_post())
        await repo.create(new_post(author=BOB, category=Category.NEWS))

        by_author = await repo.find_by_author("bob")
        by_category = await repo.find_by_category(Category.MUSIC)

        assert [p.author.username for p in by_author] == ["bob"]
        assert [p.category for p in by_category] == [Category.MUSIC]

    @pytest.mark.asyncio
    async def test_delete(self, repo, posts):
        post = await repo.create(new_post())

        await repo.delete(post.id)

        assert posts.count_documents({}) == 0
        with pytest.raises(NotFoundError):
            await repo.delete(post.id)


class TestComments:
    """Tests for embedded comments."""

    @pytest.mark.asyncio
    async def test_add_then_remove(self, repo):
        # Arrange
        post = await repo.create(new_post())
        comment = Comment(
            created=datetime.now(timezone.utc), author=BOB, body="nice"
        )

        # Act
        commented = await repo.add_comment(post.id, comment)
        comment_id = commented.comments[0].id
        cleaned = await repo.remove_comment(post.id, comment_id)

        # Assert
        assert len(comment_id) == 24
        assert commented.comments[0].body == "nice"
        assert cleaned.comments == []

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, repo):
        comment = Comment(created=datetime.now(timezone.utc), author=BOB, body="x")

        with pytest.raises(NotFoundError):
            await repo.add_comment(PostId("0" * 24), comment)


class TestVotes:
    """Tests for revision-checked vote writes."""

    @pytest.mark.asyncio
    async def test_changed_vote_moves_score_by_delta(self, repo, posts):
        # Arrange
        post = await repo.create(new_post())

        # Act
        down = await repo.add_vote(post.id, Vote(user=BOB.id, vote=DOWNVOTE))
        up = await repo.add_vote(post.id, Vote(user=BOB.id, vote=UPVOTE))

        # Assert
        assert (down.score, down.upvote_percentage) == (0, 50)
        assert (up.score, up.upvote_percentage) == (2, 100)
        assert len(up.votes) == 2
        stored = posts.find_one({})
        assert stored["score"] == 2
        assert stored["revision"] == 2

    @pytest.mark.asyncio
    async def test_cancel_vote(self, repo):
        post = await repo.create(new_post())

        cancelled = await repo.cancel_vote(post.id, ALICE.id)

        assert cancelled.score == 0
        assert cancelled.upvote_percentage == 0
        assert cancelled.votes == []

    @pytest.mark.asyncio
    async def test_vote_keeps_view_count(self, repo, posts):
        post = await repo.create(new_post())
        await repo.get_by_id(post.id)

        await repo.add_vote(post.id, Vote(user=BOB.id, vote=UPVOTE))

        assert posts.find_one({})["views"] == 1

    @pytest.mark.asyncio
    async def test_document_without_revision(self, repo, posts):
        # Arrange - stored before revisions existed
        document = post_to_document(new_post())
        del document["revision"]
        post_id = PostId(str(posts.insert_one(document).inserted_id))

        # Act
        updated = await repo.add_vote(post_id, Vote(user=BOB.id, vote=UPVOTE))

        # Assert
        assert updated.score == 2
        assert updated.revision == 1
        assert posts.find_one({})["revision"] == 1

    @pytest.mark.asyncio
    async def test_conflict_is_retried(self, posts):
        # Arrange
        collection = RacingCollection(posts, conflicts=1)
        repo = MongoPostRepository(collection)
        post = await repo.create(new_post())

        # Act
        updated = await repo.add_vote(post.id, Vote(user=BOB.id, vote=DOWNVOTE))

        # Assert
        assert collection.reads == 2
        assert updated.score == 0
        stored = posts.find_one({})
        assert [v["user"] for v in stored["votes"]] == [ALICE.id, BOB.id]
        assert stored["revision"] == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_repeated_conflicts(self, posts):
        # Arrange
        collection = RacingCollection(posts, conflicts=MAX_VOTE_ATTEMPTS)
        repo = MongoPostRepository(collection)
        post = await repo.create(new_post())

        # Act / Assert
        with pytest.raises(ConcurrentUpdateError):
            await repo.add_vote(post.id, Vote(user=BOB.id, vote=UPVOTE))

        assert collection.reads == MAX_VOTE_ATTEMPTS
        stored = posts.find_one({})
        assert stored["score"] == 1
        assert len(stored["votes"]) == 1
