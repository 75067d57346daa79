"""
pytest fixtures for integration tests.

Integration tests use:
- FastAPI's TestClient (in-process)
- The real service, port and adapter wiring
- A fresh InMemoryUserAdapter per test, injected with dependency_overrides

Decision: Overriding the adapter provider instead of clearing the cached
singleton keeps every test isolated without touching application state.
"""

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.adapters.in_memory_user_adapter import InMemoryUserAdapter
from src.main import app
from src.presentation.dependencies import get_user_adapter


@pytest.fixture
def user_adapter() -> InMemoryUserAdapter:
    """Provide the adapter the API under test will use."""
    return InMemoryUserAdapter()


@pytest.fixture
def api_client(user_adapter):
    """
    Create FastAPI TestClient wired to the test adapter.

    Decision: Using TestClient as a context manager ensures the app's
    lifespan events (startup/shutdown) are triggered.
    """
    app.dependency_overrides[get_user_adapter] = lambda: user_adapter

    with TestClient(app) as client:
        yield client

    # Clean up overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(api_client):
    """
    Helper fixture to create a user through the API.

    Usage:
        def test_something(create_user):
            response = create_user("1", "alice", "pw")
            assert response.status_code == 201
    """

    def _create(user_id: str, username: str, password: str):
        return api_client.post(
            "/api/v1/users",
            json={"id": user_id, "username": username, "password": password},
        )

    return _create
