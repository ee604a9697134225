"""Tests for the health check endpoint and the shared error envelope."""

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_200(client):
    """Health endpoint should return 200 with status, version, and environment."""
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert data["environment"] == "test"


@pytest.mark.asyncio
async def test_unknown_route_returns_not_found_envelope(client):
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "API Endpoint not found"}
