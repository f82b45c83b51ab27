import pytest
from fastapi.testclient import TestClient

from app.dao.database import InMemoryStorage
from app.dao.session_maker import get_storage
from app.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    response = client.post(
        "/api/users/register", json={"name": "A", "email": "a@x.com", "password": "p"}
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def habit(client, registered_user):
    response = client.post(
        "/api/habits",
        json={"title": "Run", "frequency": "daily", "days": [1, 2, 3, 4, 5], "userId": registered_user["id"]},
    )
    assert response.status_code == 201
    return response.json()["data"]
