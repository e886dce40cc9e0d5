"""Tests for /api/users endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.main import create_app
from postboard.services.fixtures import create_mock_user
from postboard.settings import Settings
from postboard.stores.memory import create_repositories


@pytest.fixture
def repositories():
    return create_repositories(seed=True)


@pytest.fixture
async def client(repositories):
    """Create test client over freshly seeded stores."""
    app = create_app(settings=Settings(_env_file=None), repositories=repositories)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_list_users_seeded(client: AsyncClient):
    response = await client.get("/api/users", params={"page": "1", "pageSize": "20"})
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["page"] == 1
    assert data["pageSize"] == 20
    assert data["hasMore"] is False
    assert [u["id"] for u in data["items"]] == ["user-123"]
    user = data["items"][0]
    assert user["email"] == "test@example.com"
    assert user["name"] == "Test User"
    assert user["metadata"] == {}
    assert "createdAt" in user


@pytest.mark.asyncio
async def test_list_users_defaults_and_clamping(client: AsyncClient, repositories):
    for i in range(4):
        repositories.users.insert(create_mock_user(id=f"user-{i}"))

    response = await client.get("/api/users", params={"page": "abc", "pageSize": "100000"})
    data = response.json()
    assert data["page"] == 1
    assert data["pageSize"] == 100
    assert data["total"] == 5

    response = await client.get("/api/users")
    assert response.json()["pageSize"] == 20

    response = await client.get("/api/users", params={"page": "2", "pageSize": "2"})
    data = response.json()
    assert [u["id"] for u in data["items"]] == ["user-1", "user-2"]
    assert data["hasMore"] is True


@pytest.mark.asyncio
async def test_get_user(client: AsyncClient):
    response = await client.get("/api/users/user-123")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["id"] == "user-123"
    assert isinstance(data["timestamp"], int)
    assert data["requestId"]
    assert "error" not in data


@pytest.mark.asyncio
async def test_get_user_not_found(client: AsyncClient):
    response = await client.get("/api/users/user-missing")
    assert response.status_code == 404
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "User not found"
    assert "data" not in data


@pytest.mark.asyncio
async def test_create_then_get_user_round_trip(client: AsyncClient):
    response = await client.post(
        "/api/users",
        json={"email": "ada@example.com", "name": "Ada", "metadata": {"role": "admin", "level": 3}},
    )
    assert response.status_code == 200
    created = response.json()
    assert created["success"] is True
    user = created["data"]
    assert user["id"].startswith("user-")
    assert user["id"] != "user-123"
    assert user["metadata"] == {"role": "admin", "level": 3}

    fetched = (await client.get(f"/api/users/{user['id']}")).json()
    assert fetched["success"] is True
    assert fetched["data"] == user

    listing = (await client.get("/api/users")).json()
    assert listing["total"] == 2


@pytest.mark.asyncio
async def test_create_user_rejects_bad_email(client: AsyncClient, repositories):
    response = await client.post("/api/users", json={"email": "not-an-email", "name": "X"})
    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error"].startswith("Validation failed:")
    assert "email" in data["error"]
    assert len(repositories.users) == 1


@pytest.mark.asyncio
async def test_create_user_rejects_empty_name(client: AsyncClient):
    response = await client.post("/api/users", json={"email": "a@example.com", "name": ""})
    assert response.status_code == 422
    assert "name" in response.json()["error"]
