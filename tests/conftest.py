import pytest
from fastapi.testclient import TestClient

from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.main import create_app

from tests.payloads import API, EVENT


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def register(client):
    def _register(email: str, password: str = "password123"):
        response = client.post(f"{API}/users/register", json={"email": email, "password": password})
        assert response.status_code == 201
        return response

    return _register


@pytest.fixture
def create_event(client):
    def _create(**overrides):
        response = client.post(f"{API}/events/", json={**EVENT, **overrides})
        assert response.status_code == 201
        return response.json()

    return _create
