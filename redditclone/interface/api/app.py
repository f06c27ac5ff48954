"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from redditclone.config import Settings, load_settings
from redditclone.interface.api.routes import (
    auth,
    comments,
    fallback,
    health,
    posts,
    votes,
)
from redditclone.interface.error import FieldValidationError, HTTPError
from redditclone.persistence.bootstrap import StorageBootstrap
from redditclone.util.di.container import create_container, setup_di
from redditclone.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare storage on startup and release connections on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    bootstrap = await container.get(StorageBootstrap)
    await bootstrap.apply()
    yield
    await container.close()


async def handle_http_error(request: Request, exc: HTTPError):
    if exc.field is None:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse({exc.field: exc.message}, status_code=exc.status_code)


async def handle_field_validation_error(request: Request, exc: FieldValidationError):
    return JSONResponse(exc.to_dict(), status_code=422)


def create_app(
    container: Optional[AsyncContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container, the production one when omitted
        settings: Settings, loaded from the environment when omitted

    Returns:
        Application with every route registered
    """
    settings = settings or load_settings()

    app_instance = FastAPI(
        title="Reddit Clone API",
        description="Backend API for a link and text sharing forum with votes and comments",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    @app_instance.middleware("http")
    async def recover_from_panic(request: Request, call_next):
        """Turn any unhandled failure into a plain 500."""
        try:
            return await call_next(request)
        except Exception:
            logfire.exception(
                "Unhandled error", method=request.method, path=request.url.path
            )
            return PlainTextResponse("Internal server error", status_code=500)

    app_instance.add_exception_handler(HTTPError, handle_http_error)
    app_instance.add_exception_handler(
        FieldValidationError, handle_field_validation_error
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.mount(
        "/static",
        StaticFiles(directory=settings.static_dir, check_dir=False),
        name="static",
    )
    # Catch-all, must stay last
    app_instance.include_router(fallback.router)

    return app_instance
