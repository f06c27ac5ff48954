"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from redditclone.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with MySQL and MongoDB persistence.

    Returns:
        Container ready to be attached to the app
    """
    providers = [get_provider(entry)() for entry in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can resolve FromDishka parameters."""
    setup_dishka(container, app)
