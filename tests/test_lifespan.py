"""Startup and shutdown wiring."""

from fastapi import FastAPI

from app.core.lifespan import create_lifespan
from app.infrastructure.persistence import database


async def test_lifespan_builds_navigation_catalog(app: FastAPI) -> None:
    async with create_lifespan(app):
        assert len(app.state.navigation_catalog) == 12
    assert database.engine is None
