"""Vote domain service."""

import logfire

from redditclone.domain.error import InvalidActionError, MissingIdentityError
from redditclone.domain.model import DOWNVOTE, UPVOTE, Post, Vote
from redditclone.domain.repository import PostRepository
from redditclone.domain.value import PostId, UserId, VoteAction

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def vote(self, post_id: PostId, user_id: UserId, action: str) -> Post:
        """Apply a vote action to a post.

        upvote and downvote cast or replace the user's vote, unvote
        withdraws it.

        Args:
            post_id: Post ID
            user_id: Voting user
            action: Action name from the request

        Returns:
            The updated post

        Raises:
            MissingIdentityError: If no user is given
            InvalidActionError: If the action is unknown
        """
        if not user_id:
            raise MissingIdentityError()

        try:
            vote_action = VoteAction(action)
        except ValueError:
            logfire.warn("Unknown vote action", action=action, post_id=post_id)
            raise InvalidActionError(action)

        with logfire.span(
            "vote_service.vote", post_id=post_id, user_id=user_id, action=action
        ):
            if vote_action == VoteAction.UPVOTE:
                post = await self.post_repository.add_vote(
                    post_id, Vote(user=user_id, vote=UPVOTE)
                )
            elif vote_action == VoteAction.DOWNVOTE:
                post = await self.post_repository.add_vote(
                    post_id, Vote(user=user_id, vote=DOWNVOTE)
                )
            else:
                post = await self.post_repository.cancel_vote(post_id, user_id)

            logfire.info(
                "Vote applied",
                post_id=post_id,
                user_id=user_id,
                action=action,
                score=post.score,
            )
            return post
