"""E2E test fixtures for API layer testing."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.infrastructure.api.dependencies import (
    get_memory_coverage,
    get_memory_history,
)
from src.infrastructure.api.main import app
from src.infrastructure.config import reset_settings


@pytest.fixture(autouse=True)
def clean_history(monkeypatch):
    """Use the in-memory backend and start each test with an empty store."""
    monkeypatch.setenv("HISTORY_BACKEND", "memory")
    reset_settings()
    get_memory_history().clear()
    get_memory_coverage().clear()

    yield

    get_memory_history().clear()
    get_memory_coverage().clear()
    app.dependency_overrides.clear()
    reset_settings()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client bound to the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
