"""Auth and app-level API tests."""

from fastapi.testclient import TestClient

from puckmind.api.dependencies import get_game_service
from puckmind.main import app

SIGNUP = {
    "email": "newplayer@example.com",
    "password": "password123",
    "name": "New Player",
    "team": "JWU Wildcats",
    "position": "Center",
}


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup(client):
    """Test player signup."""
    response = client.post("/api/auth/signup", json=SIGNUP)
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created successfully"
    assert data["user"]["email"] == "newplayer@example.com"
    assert data["user"]["team"] == "JWU Wildcats"
    assert data["user"]["position"] == "Center"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


def test_signup_missing_field(client):
    """Every signup field is required."""
    response = client.post("/api/auth/signup", json={**SIGNUP, "team": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required"}


def test_signup_invalid_email(client):
    response = client.post("/api/auth/signup", json={**SIGNUP, "email": "not-an-email"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid email format"


def test_signup_short_password(client):
    response = client.post("/api/auth/signup", json={**SIGNUP, "password": "short"})
    assert response.status_code == 400
    assert response.json()["error"] == "Password must be at least 8 characters long"


def test_signup_invalid_position(client):
    response = client.post("/api/auth/signup", json={**SIGNUP, "position": "Striker"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid position"


def test_signup_duplicate_email(client, auth_headers):
    """Test signup with duplicate email fails with 409."""
    response = client.post("/api/auth/signup", json={**SIGNUP, "email": auth_headers.email})
    assert response.status_code == 409
    assert response.json()["error"] == "User with this email already exists"


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"
    assert data["user"]["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Incorrect email or password"


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email


def test_unauthorized_access(client):
    """Test that endpoints require authentication."""
    response = client.get("/api/games")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_invalid_token(client):
    response = client.get("/api/games", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert "error" in response.json()


def test_store_failure_is_internal_error(client, auth_headers):
    """Unexpected failures become a generic 500 without leaking details."""

    class BrokenService:
        def list_games(self, principal):
            raise RuntimeError("connection refused to db-host:5432")

    app.dependency_overrides[get_game_service] = BrokenService
    with TestClient(app, raise_server_exceptions=False) as broken_client:
        response = broken_client.get("/api/games", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
