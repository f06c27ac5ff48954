"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from redditclone.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app():
    """Application backed by in-memory persistence."""
    return create_app(container=build_test_container())


@pytest.fixture
def client(app):
    """Create test client, running startup and shutdown."""
    with TestClient(app) as test_client:
        yield test_client
