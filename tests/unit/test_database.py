"""Lazy engine creation and the repository base contract."""

from collections.abc import Iterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import Course
from app.infrastructure.persistence.repositories.base import SubstringSearchRepository


@pytest.fixture
def fresh_engine_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    database.engine = None
    database.AsyncSessionLocal = None
    get_settings.cache_clear()
    yield monkeypatch
    database.engine = None
    database.AsyncSessionLocal = None
    get_settings.cache_clear()


def test_get_engine_without_database_url(fresh_engine_state) -> None:
    fresh_engine_state.setenv("DATABASE_URL", "")
    assert database.get_engine() is None


async def test_get_engine_is_created_once_and_disposed(fresh_engine_state) -> None:
    fresh_engine_state.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    engine = database.get_engine()
    assert isinstance(engine, AsyncEngine)
    assert database.get_engine() is engine
    await database.dispose_engine()
    assert database.engine is None


def test_repository_without_record_mapping_cannot_be_built() -> None:
    class CourseCodes(SubstringSearchRepository[Course, str]):
        search_columns = (Course.code,)

    with pytest.raises(TypeError):
        CourseCodes(async_sessionmaker(), Course)
