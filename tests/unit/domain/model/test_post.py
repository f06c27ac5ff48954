"""Unit tests for the Post aggregate."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from redditclone.domain.error import NotFoundError
from redditclone.domain.model import DOWNVOTE, UPVOTE, Post, Vote
from redditclone.domain.model.post import upvote_percentage
from redditclone.domain.value import Author, Category, PostType, UserId

AUTHOR = Author(id=UserId("a" * 24), username="alice")


def make_post(**overrides) -> Post:
    fields = {
        "type": PostType.TEXT,
        "title": "Hello",
        "category": Category.MUSIC,
        "text": "first post",
        "author": AUTHOR,
        "score": 1,
        "votes": [Vote(user=AUTHOR.id, vote=UPVOTE)],
        "created": datetime.now(timezone.utc),
    }
    fields.update(overrides)
    return Post(**fields)


class TestPostContent:
    """Tests for post type content rules."""

    def test_text_post_requires_text(self):
        with pytest.raises(PydanticValidationError):
            make_post(text=None)

    def test_text_post_rejects_url(self):
        with pytest.raises(PydanticValidationError):
            make_post(url="http://example.com")

    def test_link_post_requires_url(self):
        with pytest.raises(PydanticValidationError):
            make_post(type=PostType.LINK, text=None)

    def test_link_post_with_url(self):
        post = make_post(type=PostType.LINK, text=None, url="http://example.com")

        assert post.url == "http://example.com"
        assert post.text is None

    def test_unknown_category_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_post(category="sports")


class TestUpvotePercentage:
    """Tests for the upvote percentage formula."""

    def test_no_votes_is_zero(self):
        assert upvote_percentage([]) == 0

    def test_truncates(self):
        votes = [
            Vote(user=UserId("u1"), vote=UPVOTE),
            Vote(user=UserId("u2"), vote=UPVOTE),
            Vote(user=UserId("u3"), vote=DOWNVOTE),
        ]

        assert upvote_percentage(votes) == 66


class TestWithVote:
    """Tests for casting and replacing votes."""

    def test_new_vote_appended(self):
        # Arrange
        post = make_post()

        # Act
        updated = post.with_vote(Vote(user=UserId("b" * 24), vote=DOWNVOTE))

        # Assert
        assert len(updated.votes) == 2
        assert updated.score == 0
        assert updated.upvote_percentage == 50

    def test_repeat_vote_is_idempotent(self):
        post = make_post()

        updated = post.with_vote(Vote(user=AUTHOR.id, vote=UPVOTE))

        assert updated.votes == post.votes
        assert updated.score == 1
        assert updated.upvote_percentage == 100

    def test_flipping_vote_moves_score_by_two(self):
        post = make_post()

        updated = post.with_vote(Vote(user=AUTHOR.id, vote=DOWNVOTE))

        assert len(updated.votes) == 1
        assert updated.votes[0].vote == DOWNVOTE
        assert updated.score == -1
        assert updated.upvote_percentage == 0

    def test_original_unchanged(self):
        post = make_post()

        post.with_vote(Vote(user=UserId("b" * 24), vote=DOWNVOTE))

        assert post.score == 1
        assert len(post.votes) == 1


class TestWithoutVote:
    """Tests for withdrawing votes."""

    def test_removes_vote(self):
        post = make_post()

        updated = post.without_vote(AUTHOR.id)

        assert updated.votes == []
        assert updated.score == 0
        assert updated.upvote_percentage == 0

    def test_missing_vote_raises(self):
        post = make_post()

        with pytest.raises(NotFoundError):
            post.without_vote(UserId("b" * 24))

    def test_score_always_sum_of_votes(self):
        post = make_post()
        voters = [UserId(c * 24) for c in "bcd"]

        post = post.with_vote(Vote(user=voters[0], vote=DOWNVOTE))
        post = post.with_vote(Vote(user=voters[1], vote=UPVOTE))
        post = post.with_vote(Vote(user=voters[2], vote=DOWNVOTE))
        post = post.without_vote(voters[1])
        post = post.with_vote(Vote(user=voters[0], vote=UPVOTE))

        assert post.score == sum(v.vote for v in post.votes)
        assert len({v.user for v in post.votes}) == len(post.votes)
