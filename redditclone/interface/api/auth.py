"""Request authentication.

Routes are split into public and identified at registration: identified
routes carry the `authenticate` dependency, public routes do not. For an
identified request the bearer token is verified, the user must still
hold an unexpired session, and the token's user becomes the request
identity on `request.state.identity`.
"""

from enum import Enum

import logfire
from fastapi import Depends, FastAPI, Request
from fastapi.routing import APIRoute

from redditclone.domain.service import JWTService, SessionService
from redditclone.domain.value import Author, UserId
from redditclone.interface.error import unauthorized
from redditclone.util.jwt import JWTError

BEARER_PREFIX = "Bearer "


class RouteAccess(str, Enum):
    """Authentication requirement of a route."""

    PUBLIC = "public"
    IDENTIFIED = "identified"


async def authenticate(request: Request) -> Author:
    """Verify the bearer token and session, then attach the identity.

    Args:
        request: Incoming request

    Returns:
        Identity of the requesting user

    Raises:
        HTTPError: 401 {"message": "unauthorized"} on any failure
    """
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        raise unauthorized()
    token = header[len(BEARER_PREFIX) :]

    container = request.state.dishka_container
    jwt_service = await container.get(JWTService)
    session_service = await container.get(SessionService)

    try:
        payload = jwt_service.verify_token(token)
    except JWTError:
        raise unauthorized()

    user_id = UserId(payload.user.id)
    try:
        active = await session_service.is_active(user_id)
    except Exception:
        logfire.exception("Session lookup failed", user_id=user_id)
        raise unauthorized()

    if not active:
        logfire.info("No active session", user_id=user_id)
        raise unauthorized()

    identity = Author(id=user_id, username=payload.user.username)
    request.state.identity = identity
    return identity


def current_identity(request: Request) -> Author:
    """Return the identity attached by `authenticate`.

    Raises:
        HTTPError: 401 if no identity was attached
    """
    identity = getattr(request.state, "identity", None)
    if not isinstance(identity, Author) or not identity.id:
        raise unauthorized()
    return identity


IDENTIFIED = [Depends(authenticate)]


def route_access(route: APIRoute) -> RouteAccess:
    """Tell whether a route requires authentication."""
    if any(d.dependency is authenticate for d in route.dependencies):
        return RouteAccess.IDENTIFIED
    return RouteAccess.PUBLIC


def classify_routes(app: FastAPI) -> dict[tuple[str, str], RouteAccess]:
    """Map every (method, path template) of the application to its access.

    Args:
        app: Application with all routers included

    Returns:
        Access of each API route
    """
    table: dict[tuple[str, str], RouteAccess] = {}
    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue
        access = route_access(route)
        for method in route.methods:
            table[(method, route.path)] = access
    return table
