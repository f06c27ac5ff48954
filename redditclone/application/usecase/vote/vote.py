"""Vote use case."""

from pydantic import BaseModel

from redditclone.domain.service import VoteService
from redditclone.domain.value import PostId, UserId

from ..base import BaseUseCase
from ..response import PostResponse


class VoteRequest(BaseModel):
    """Vote request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    action: str  # upvote, downvote or unvote


class VoteUseCase(BaseUseCase):
    """Use case for upvoting, downvoting and unvoting a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> PostResponse:
        """Apply the vote action.

        Args:
            request: Vote request

        Returns:
            The post with its new score and upvote percentage

        Raises:
            InvalidActionError: If the action is unknown
            MissingIdentityError: If the user id is empty
            NotFoundError: If the post, or the vote to cancel, does not exist
            ConcurrentUpdateError: If concurrent voters won every attempt
        """
        post = await self.vote_service.vote(
            PostId(request.post_id), UserId(request.user_id), request.action
        )
        return PostResponse.from_domain(post)
