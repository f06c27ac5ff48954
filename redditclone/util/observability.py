"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Post created", post_id=post.id, author=post.author.username)

    with logfire.span("vote_service.vote", post_id=post_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from redditclone.config import Settings

SERVICE_NAME = "redditclone-api"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Spans go to the Logfire cloud only when OBSERVABILITY__SEND_TO_LOGFIRE
    says so, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is.
    The console always gets them.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, path and client address.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        extra = {"method": request.method, "path": request.url.path}
        if request.client:
            extra["client_host"] = request.client.host
        return {**attributes, **extra}

    logfire.instrument_fastapi(
        app,
        # Authorization headers carry bearer tokens
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the users and sessions tables."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_pymongo() -> None:
    """Trace commands against the posts collection."""
    logfire.instrument_pymongo()
