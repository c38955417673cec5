import pytest
from fastapi.testclient import TestClient

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.main import app
from fixturedesk.schemas.auth_schemas import TokenData
from fixturedesk.services.tournament_service import TournamentService

def override_get_current_admin():
    return TokenData(username="admin", role="admin")

@pytest.fixture
def tournament_service(tmp_path):
    return TournamentService(data_file_path=str(tmp_path / "tournament.json"))

@pytest.fixture
def client(tournament_service):
    app.dependency_overrides[get_tournament_service] = lambda: tournament_service
    app.dependency_overrides[get_current_admin] = override_get_current_admin
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def anonymous_client(tournament_service):
    """Client without the admin override, for auth and public routes."""
    app.dependency_overrides[get_tournament_service] = lambda: tournament_service
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def configured_client(client):
    response = client.put(
        "/api/tournament/settings",
        json={"name": "Club Open", "types": ["Singles", "Doubles"], "categories": ["Open", "40+"]},
    )
    assert response.status_code == 200
    return client

def _add_players(client, count, category="Open", prefix="P"):
    ids = []
    for i in range(count):
        response = client.post(
            "/api/players",
            json={"name": f"{prefix}{i}", "mobile": f"{prefix}-555{i:04d}", "categories": [category]},
        )
        assert response.status_code == 201
        ids.append(response.json()["id"])
    return ids

@pytest.fixture
def add_players():
    """Registers `count` players through the API and returns their ids."""
    return _add_players
