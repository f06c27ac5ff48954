"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from redditclone.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to in-memory.

    Args:
        unmock: Components that keep their production implementation

    Returns:
        Container usable both directly and behind a TestClient app

    Raises:
        ValueError: If unmock names a component that does not exist

    Examples:
        # Unit and E2E tests
        container = build_test_container()

        # Real MySQL and MongoDB, both must be running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = {entry.__mock_component__ for entry in PROVIDERS} - {None}
    if unmock - known:
        raise ValueError(f"Unknown components: {unmock - known}")

    providers = []
    for entry in PROVIDERS:
        component = entry.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(entry, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
