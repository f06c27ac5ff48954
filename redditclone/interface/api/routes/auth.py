"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request

from redditclone.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
    TokenResponse,
)
from redditclone.application.usecase.response import MessageResponse
from redditclone.domain.error import AlreadyExistsError, DomainError, NotFoundError
from redditclone.domain.value import Author
from redditclone.interface.api.auth import IDENTIFIED, current_identity
from redditclone.interface.api.body import parse_body, require_json_content_type
from redditclone.interface.error import FieldValidationError, HTTPError

router = APIRouter(prefix="/api", tags=["auth"], route_class=DishkaRoute)


@router.post("/register", response_model=TokenResponse)
async def register(
    request: Request,
    register_use_case: FromDishka[RegisterUseCase],
) -> TokenResponse:
    """Create an account and sign in.

    Args:
        request: Request with a JSON {username, password} body
        register_use_case: Register use case from DI

    Returns:
        Bearer token for the new user

    Raises:
        HTTPError: 400 for a bad body, 500 if the account cannot be set up
        FieldValidationError: 422 if the username is taken
    """
    require_json_content_type(request)
    body = await parse_body(request, RegisterRequest, "bad json", strict_schema=True)

    try:
        response = await register_use_case.execute(body)
    except AlreadyExistsError:
        raise FieldValidationError(
            param="username", value=body.username, msg="already exists"
        )
    except DomainError as e:
        logfire.error("Registration failed", username=body.username, error=str(e))
        raise HTTPError(500, str(e), field=None)

    logfire.info("register", username=body.username)
    return response


@router.post("/login", response_model=TokenResponse)
async def login(
    request: Request,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse:
    """Sign in with username and password.

    Args:
        request: Request with a JSON {username, password} body
        login_use_case: Login use case from DI

    Returns:
        Bearer token

    Raises:
        HTTPError: 400 for a bad body, 401 for unknown user or wrong password
    """
    require_json_content_type(request)
    body = await parse_body(request, LoginRequest, "bad json", strict_schema=True)

    try:
        response = await login_use_case.execute(body)
    except NotFoundError:
        raise HTTPError(401, "user not found")
    except DomainError:
        raise HTTPError(401, "invalid password")

    logfire.info("login", username=body.username)
    return response


@router.post("/logout", response_model=MessageResponse, dependencies=IDENTIFIED)
async def logout(
    logout_use_case: FromDishka[LogoutUseCase],
    identity: Author = Depends(current_identity),
) -> MessageResponse:
    """End every session of the current user.

    Tokens issued earlier stop working because no active session remains.
    """
    return await logout_use_case.execute(LogoutRequest(user_id=identity.id))
