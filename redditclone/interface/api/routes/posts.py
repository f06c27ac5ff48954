"""Post routes: listings, creation, single post view and deletion."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from redditclone.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from redditclone.application.usecase.response import MessageResponse, PostResponse
from redditclone.domain.error import NotFoundError, ValidationError
from redditclone.domain.value import Author, Category, PostType
from redditclone.interface.api.auth import IDENTIFIED, current_identity
from redditclone.interface.api.body import parse_body
from redditclone.interface.api.params import require_category, require_post_id
from redditclone.interface.error import HTTPError

router = APIRouter(prefix="/api", tags=["posts"], route_class=DishkaRoute)


class PostPayload(BaseModel):
    """Body of a create post request."""

    type: PostType
    title: str
    category: Category
    text: Optional[str] = None
    url: Optional[str] = None


@router.get(
    "/posts/",
    response_model=list[PostResponse],
    response_model_exclude_none=True,
)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List every post, highest score first."""
    return await list_posts_use_case.execute(ListPostsRequest())


@router.get(
    "/posts/{category}",
    response_model=list[PostResponse],
    response_model_exclude_none=True,
)
async def list_posts_by_category(
    category: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List posts in a category.

    Raises:
        HTTPError: 400 if the category is not one of the known ones
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(category=require_category(category))
    )


@router.get(
    "/user/{login}",
    response_model=list[PostResponse],
    response_model_exclude_none=True,
)
async def list_posts_by_user(
    login: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List posts written by the user with the given username."""
    return await list_posts_use_case.execute(ListPostsRequest(author=login))


@router.post(
    "/posts",
    response_model=PostResponse,
    response_model_exclude_none=True,
    dependencies=IDENTIFIED,
)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity: Author = Depends(current_identity),
) -> PostResponse:
    """Publish a text or link post as the current user.

    Args:
        request: Request with a JSON post body
        create_post_use_case: Create post use case from DI
        identity: Current user

    Returns:
        The stored post

    Raises:
        HTTPError: 400 for an undecodable body or content not matching the type
    """
    payload = await parse_body(request, PostPayload, "invalid JSON payload")

    try:
        post = await create_post_use_case.execute(
            CreatePostRequest(
                type=payload.type,
                title=payload.title,
                category=payload.category,
                text=payload.text,
                url=payload.url,
                author=identity,
            )
        )
    except ValidationError as e:
        raise HTTPError(400, str(e), field="error")

    logfire.info("Post created", post_id=post.id, author=identity.username)
    return post


@router.get(
    "/post/{post_id}",
    response_model=PostResponse,
    response_model_exclude_none=True,
)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Show a post, counting one view.

    Raises:
        HTTPError: 400 for a malformed id, 404 if the post does not exist
    """
    require_post_id(post_id)

    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPError(404, str(e))
    except ValidationError:
        raise HTTPError(400, "invalid post id")


@router.delete(
    "/post/{post_id}",
    response_model=MessageResponse,
    dependencies=IDENTIFIED,
)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity: Author = Depends(current_identity),
) -> MessageResponse:
    """Delete a post together with its comments and votes.

    Any identified user may delete any post.

    Raises:
        HTTPError: 400 for a malformed id, 404 if the post does not exist
    """
    require_post_id(post_id)

    try:
        response = await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id)
        )
    except NotFoundError as e:
        raise HTTPError(404, str(e), field="error")
    except ValidationError as e:
        raise HTTPError(400, str(e), field="error")

    logfire.info("Post deleted", post_id=post_id, user=identity.username)
    return response
