"""Pytest configuration and fixtures for global search.

HTTP tests build a fresh app per test with DATABASE_URL cleared, so search
runs without a store unless a test overrides get_search_service.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.core.limiter import limiter
from app.infrastructure.persistence import database
from app.main import create_app


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch) -> Iterator[FastAPI]:
    """App with no store configured and an empty rate-limit window."""
    monkeypatch.setenv("DATABASE_URL", "")
    get_settings.cache_clear()
    database.engine = None
    database.AsyncSessionLocal = None
    limiter.reset()
    application = create_app()
    yield application
    application.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
