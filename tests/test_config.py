"""Settings guards and startup selection of auth provider and store."""

import pytest

from puckmind.api.dependencies import get_auth_provider, get_memory_store, get_store
from puckmind.config import Settings
from puckmind.models.mental_state import MentalState
from puckmind.services.auth import AlwaysDevPrincipal, JWTAuthProvider
from puckmind.stores.memory import InMemoryStore
from puckmind.stores.sql import SqlStore

PRODUCTION = {
    "environment": "production",
    "jwt_secret": "a-real-secret",
    "database_url": "postgresql://puckmind@db.internal:5432/puckmind",
}

GAME = {"date": "2024-01-01", "opponent": "Rangers", "homeAway": "home", "result": "win"}
MENTAL = {
    "confidence": 9,
    "sleepHours": 8,
    "sleepQuality": 8,
    "stressLevel": 2,
    "physicalEnergy": 9,
}


def test_production_settings_accepted():
    settings = Settings(**PRODUCTION)
    assert settings.is_production
    assert settings.auth_provider == "jwt"
    assert settings.store_backend == "sql"


@pytest.mark.parametrize(
    "override, message",
    [
        ({"auth_provider": "dev"}, "AUTH_PROVIDER=dev"),
        ({"store_backend": "memory"}, "STORE_BACKEND=memory"),
        ({"jwt_secret": "change-me-in-production"}, "JWT_SECRET"),
        ({"database_url": "postgresql://puckmind@localhost/puckmind"}, "localhost"),
    ],
)
def test_production_refuses_unsafe_settings(override, message):
    with pytest.raises(ValueError, match=message):
        Settings(**{**PRODUCTION, **override})


def test_development_allows_dev_variants():
    settings = Settings(environment="development", auth_provider="dev", store_backend="memory")
    assert (settings.auth_provider, settings.store_backend) == ("dev", "memory")


def test_default_collaborators(db):
    assert isinstance(get_auth_provider(), JWTAuthProvider)
    assert isinstance(get_store(db), SqlStore)


def test_dev_collaborators_selected_from_settings(dev_client, db):
    provider = get_auth_provider()
    assert isinstance(provider, AlwaysDevPrincipal)
    assert provider.email == "dev@example.com"
    store = get_store(db)
    assert isinstance(store, InMemoryStore)
    assert store is get_memory_store()


def test_dev_mode_needs_no_token(dev_client):
    response = dev_client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.json()["email"] == "dev@example.com"


def test_dev_mode_round_trip_stays_in_memory(dev_client, db):
    response = dev_client.post("/api/games", json={**GAME, "goals": 1, "assists": 2})
    assert response.status_code == 201
    game_id = response.json()["game"]["id"]

    response = dev_client.post(f"/api/games/{game_id}/mental", json=MENTAL)
    assert response.status_code == 201

    response = dev_client.get("/api/dashboard")
    assert response.status_code == 200
    assert response.json()["totalGames"] == 1
    assert response.json()["avgPoints"] == 3.0

    # Nothing reached the database
    assert db.query(MentalState).count() == 0

    response = dev_client.delete(f"/api/games/{game_id}")
    assert response.status_code == 200
    assert dev_client.get(f"/api/games/{game_id}").status_code == 404
