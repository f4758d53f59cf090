"""
Fixtures for HTTP endpoint tests.

The app is built with create_app(); services and identity are swapped in
through dependency_overrides so no database is touched. The lifespan is not
entered (TestClient is used without a context manager).

Dependencies: fastapi, pytest
System role: API test infrastructure
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tutorbot.api.deps.dependencies import get_current_user_id
from tutorbot.api.main import create_app


@pytest.fixture
def app():
    application = create_app()
    yield application
    application.dependency_overrides.clear()

@pytest.fixture
def anonymous_client(app) -> TestClient:
    """Client without an identity override; X-User-Id is parsed for real."""
    return TestClient(app)

@pytest.fixture
def client(app, user_id) -> TestClient:
    app.dependency_overrides[get_current_user_id] = lambda: user_id
    return TestClient(app)

@pytest.fixture
def override(app):
    """Install an AsyncMock service for a dependency provider and return it."""

    def _install(provider, service: AsyncMock | None = None) -> AsyncMock:
        service = service or AsyncMock()
        app.dependency_overrides[provider] = lambda: service
        return service

    return _install
