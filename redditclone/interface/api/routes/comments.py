"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from redditclone.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from redditclone.application.usecase.response import PostResponse
from redditclone.domain.error import NotFoundError, ValidationError
from redditclone.domain.value import Author
from redditclone.interface.api.auth import IDENTIFIED, current_identity
from redditclone.interface.api.body import parse_body
from redditclone.interface.api.params import require_comment_id, require_post_id
from redditclone.interface.error import HTTPError

router = APIRouter(prefix="/api", tags=["comments"], route_class=DishkaRoute)


class CommentPayload(BaseModel):
    """Body of an add comment request."""

    comment: str = Field(min_length=1)


@router.post(
    "/post/{post_id}",
    response_model=PostResponse,
    response_model_exclude_none=True,
    dependencies=IDENTIFIED,
)
async def add_comment(
    post_id: str,
    request: Request,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    identity: Author = Depends(current_identity),
) -> PostResponse:
    """Comment on a post as the current user.

    Args:
        post_id: Post ID
        request: Request with a JSON {"comment": ...} body
        add_comment_use_case: Add comment use case from DI
        identity: Current user

    Returns:
        The post including the new comment

    Raises:
        HTTPError: 400 for a bad id or body, 404 if the post does not exist
    """
    require_post_id(post_id)
    payload = await parse_body(request, CommentPayload, "invalid JSON payload")

    try:
        post = await add_comment_use_case.execute(
            AddCommentRequest(post_id=post_id, body=payload.comment, author=identity)
        )
    except NotFoundError as e:
        raise HTTPError(404, str(e), field="error")
    except ValidationError as e:
        raise HTTPError(400, str(e), field="error")

    logfire.info("Comment added", post_id=post_id, author=identity.username)
    return post


@router.delete(
    "/post/{post_id}/{comm_id}",
    response_model=PostResponse,
    response_model_exclude_none=True,
    dependencies=IDENTIFIED,
)
async def remove_comment(
    post_id: str,
    comm_id: str,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
) -> PostResponse:
    """Delete a comment from a post.

    Any identified user may delete any comment. An unknown comment id
    leaves the post unchanged.

    Raises:
        HTTPError: 400 for malformed ids, 404 if the post does not exist
    """
    require_post_id(post_id)
    require_comment_id(comm_id)

    try:
        return await remove_comment_use_case.execute(
            RemoveCommentRequest(post_id=post_id, comment_id=comm_id)
        )
    except NotFoundError as e:
        raise HTTPError(404, str(e), field="error")
    except ValidationError as e:
        raise HTTPError(400, str(e), field="error")
