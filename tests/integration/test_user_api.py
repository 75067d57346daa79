"""
Integration tests for the user endpoints.

Tests the /api/v1/users endpoints with:
- Real FastAPI application (TestClient)
- Real application service and in-memory adapter
"""

from fastapi.testclient import TestClient

from src.domain.exceptions import UserNotFoundError
from src.domain.user import User
from src.main import app
from src.presentation.dependencies import get_user_adapter


def test_create_then_get_user(api_client, create_user):
    """
    Test that a created user can be fetched back.

    Verifies:
    - 201 Created on creation
    - 200 OK on lookup with the same id and username
    - No password material in either response
    """
    response = create_user("1", "alice", "pw")
    assert response.status_code == 201, f"Expected 201, got {response.status_code}: {response.text}"

    response = api_client.get("/api/v1/users/1")
    assert response.status_code == 200, f"Expected 200, got {response.status_code}: {response.text}"

    data = response.json()
    assert data["id"] == "1"
    assert data["username"] == "alice"
    assert "password" not in data
    assert "password_hash" not in data


def test_get_unknown_user_returns_404(api_client):
    """Test that looking up an id nobody created returns 404."""
    response = api_client.get("/api/v1/users/missing")

    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "UserNotFound"


def test_created_user_is_stored_with_hashed_password(create_user, user_adapter):
    """Test that the adapter's store holds a hashed password."""
    create_user("1", "alice", "pw")

    stored = user_adapter.database.find_by_id("1")
    assert stored is not None
    assert stored.password_hash != "pw"
    assert stored.verify_password("pw")


def test_duplicate_ids_are_accepted_and_first_wins(api_client, create_user, user_adapter):
    """Test that a second user with the same id does not replace the first."""
    assert create_user("1", "alice", "pw").status_code == 201
    assert create_user("1", "bob", "pw").status_code == 201

    assert len(user_adapter.database) == 2
    assert api_client.get("/api/v1/users/1").json()["username"] == "alice"


def test_invalid_payload_returns_400(api_client):
    """Test that a malformed body is rejected with the validation error format."""
    response = api_client.post("/api/v1/users", json={"username": "alice"})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"] == "ValidationError"
    assert any(error.startswith("id") for error in detail["errors"])


def test_store_lifecycle_then_lookup(api_client, create_user, user_adapter):
    """
    Test the full record lifecycle behind the port.

    Create through the API, update and delete through the store, then
    confirm the API reports the user as missing.
    """
    create_user("1", "alice", "pw")
    database = user_adapter.database
    original = database.find_by_id("1")

    database.update(
        "1", User(id="1", username="alice2", password_hash=original.password_hash)
    )
    assert api_client.get("/api/v1/users/1").json()["username"] == "alice2"

    database.delete("1")
    assert database.find_by_id("1") is None

    response = api_client.get("/api/v1/users/1")
    assert response.status_code == 404
    assert response.json()["detail"]["message"] == str(UserNotFoundError("1"))


def test_overlong_password_returns_400(api_client, create_user, user_adapter):
    """Test that passwords bcrypt cannot hash are rejected, not a 500."""
    response = create_user("1", "alice", "x" * 100)

    assert response.status_code == 400, f"Expected 400, got {response.status_code}: {response.text}"
    assert response.json()["detail"]["error"] == "ValidationError"

    response = create_user("1", "alice", "é" * 40)

    assert response.status_code == 400, f"Expected 400, got {response.status_code}: {response.text}"
    assert response.json()["detail"]["error"] == "DomainError"
    assert len(user_adapter.database) == 0


def test_shutdown_clears_the_store_the_routes_used(user_adapter):
    """Test that leaving the app lifespan empties the injected adapter's store."""
    app.dependency_overrides[get_user_adapter] = lambda: user_adapter
    try:
        with TestClient(app) as client:
            response = client.post(
                "/api/v1/users",
                json={"id": "1", "username": "alice", "password": "pw"},
            )
            assert response.status_code == 201
            assert len(user_adapter.database) == 1

        assert len(user_adapter.database) == 0
    finally:
        app.dependency_overrides.clear()
