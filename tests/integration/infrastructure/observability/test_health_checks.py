"""Integration tests for health check endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.infrastructure.api.main import app

transport = ASGITransport(app=app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_liveness_probe_always_returns_200(self):
        """Test that /health endpoint always returns 200 (liveness)."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["service"] == "uptime-engine"
            assert data["history_backend"] in ("memory", "http")

    @pytest.mark.asyncio
    async def test_responses_carry_correlation_id(self):
        """Test that the error handler middleware tags every response."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")

            assert response.headers.get("X-Correlation-ID")

    @pytest.mark.asyncio
    async def test_root_endpoint(self):
        """Test the API information endpoint."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/")

            assert response.status_code == 200
            assert response.json()["name"] == "Uptime Engine API"
