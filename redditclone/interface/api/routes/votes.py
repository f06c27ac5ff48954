"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from redditclone.application.usecase.response import PostResponse
from redditclone.application.usecase.vote import VoteRequest, VoteUseCase
from redditclone.domain.error import (
    ConcurrentUpdateError,
    NotFoundError,
    ValidationError,
)
from redditclone.domain.value import Author
from redditclone.interface.api.auth import IDENTIFIED, current_identity
from redditclone.interface.api.params import require_post_id
from redditclone.interface.error import HTTPError

router = APIRouter(prefix="/api", tags=["votes"], route_class=DishkaRoute)


@router.get(
    "/post/{post_id}/{action}",
    response_model=PostResponse,
    response_model_exclude_none=True,
    dependencies=IDENTIFIED,
)
async def vote(
    post_id: str,
    action: str,
    vote_use_case: FromDishka[VoteUseCase],
    identity: Author = Depends(current_identity),
) -> PostResponse:
    """Upvote, downvote or unvote a post.

    Args:
        post_id: Post ID
        action: upvote, downvote or unvote
        vote_use_case: Vote use case from DI
        identity: Current user

    Returns:
        The post with its new score and upvote percentage

    Raises:
        HTTPError: 400 for a bad id or action, 404 if the post or the vote
            to cancel does not exist, 409 if concurrent voters won every attempt
    """
    require_post_id(post_id)

    try:
        post = await vote_use_case.execute(
            VoteRequest(post_id=post_id, user_id=identity.id, action=action)
        )
    except NotFoundError as e:
        raise HTTPError(404, str(e), field="error")
    except ConcurrentUpdateError as e:
        raise HTTPError(409, str(e), field="error")
    except ValidationError as e:
        raise HTTPError(400, str(e), field="error")

    logfire.info("Vote applied", post_id=post_id, user=identity.username, action=action)
    return post
