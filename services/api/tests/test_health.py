"""Tests for health, landing page and API info endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.main import create_app
from postboard.settings import Settings


@pytest.fixture
async def client():
    """Create test client."""
    app = create_app(settings=Settings(_env_file=None, app_version="9.9.9", api_version="v1"))
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_api_info(client: AsyncClient):
    response = await client.get("/api")
    assert response.status_code == 200
    assert response.json() == {"message": "Hello, World!", "version": "9.9.9", "apiVersion": "v1"}


@pytest.mark.asyncio
async def test_landing_page_is_html(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    body = response.text
    assert "<h1>Hello, World!</h1>" in body
    assert "9.9.9" in body
    assert "/api/users" in body
    assert "/api/users/{id}" in body


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/nope")
    assert response.status_code == 404
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Not Found"
    assert "data" not in data
