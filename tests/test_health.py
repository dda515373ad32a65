"""Tests for liveness endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_root_returns_welcome_text(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Welcome to evergreen nursery server."


@pytest.mark.asyncio
async def test_routes_fail_individually_without_database(client: AsyncClient):
    """Without a store connection every catalog call is its own 500."""
    response = await client.get("/categories")
    assert response.status_code == 500
    body = response.json()
    assert body["statusCode"] == 500
    assert body["message"] == "Failed to retrieve categories"
    assert "not initialized" in body["error"]
