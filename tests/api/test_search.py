"""HTTP tests for GET /api/v1/search (service overridden with mocked repos)."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from app.api.v1.dependencies import get_search_service
from app.application.dtos.records import AuditLogRecord, CourseRecord
from app.application.use_cases.search import (
    AuditLogSearchAdapter,
    CourseSearchAdapter,
    SearchService,
    build_default_catalog,
)


def _repo(records: list) -> AsyncMock:
    repo = AsyncMock()
    repo.find_matching.return_value = records
    return repo


@pytest.fixture
def course_repo() -> AsyncMock:
    return _repo(
        [
            CourseRecord(id="c1", code="PHY101", title="Physics I", department="Science", credit=3),
            CourseRecord(id="c2", code="PHY102", title="Physics II", department="Science", credit=3),
            CourseRecord(id="c3", code="SCI300", title="Lab Safety", department="Physics"),
        ]
    )


@pytest.fixture
def mocked_search(app: FastAPI, course_repo: AsyncMock) -> SearchService:
    service = SearchService(
        adapters=[
            CourseSearchAdapter(course_repo),
            AuditLogSearchAdapter(
                _repo(
                    [
                        AuditLogRecord(
                            id="l1",
                            admin_name="Root",
                            action="CREATE",
                            resource_type="course",
                            description="Added Physics I",
                            method="POST",
                            success=False,
                        )
                    ]
                )
            ),
        ],
        navigation=build_default_catalog(),
        store=AsyncMock(),
    )
    app.dependency_overrides[get_search_service] = lambda: service
    return service


async def test_short_query_without_store_returns_navigation(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "a"})
    assert response.status_code == 200
    data = response.json()
    assert data["totalResults"] == 0
    assert isinstance(data["searchTime"], int)
    assert len(data["results"]) == 12
    assert data["results"][0]["type"] == "navigation"


async def test_missing_q_is_short_query(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search")
    assert response.status_code == 200
    assert response.json()["totalResults"] == 0


async def test_search_without_store_returns_500_error(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics"})
    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error"}
    assert body["error"].startswith("Search failed: ")


async def test_search_returns_unified_results(client: AsyncClient, mocked_search) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics"})
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"results", "totalResults", "searchTime"}
    ids = [r["id"] for r in data["results"]]
    assert ids == ["c1", "c2", "c3", "l1"]
    first = data["results"][0]
    assert first["title"] == "PHY101 - Physics I"
    assert first["type"] == "course"
    assert first["url"] == "/dashboard/courses"
    assert first["metadata"]["code"] == "PHY101"
    log = data["results"][-1]
    assert log["type"] == "system-log"
    assert log["description"] == "Added Physics I | By Root | Failed"


async def test_limit_truncates(client: AsyncClient, mocked_search) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics", "limit": 2})
    data = response.json()
    assert len(data["results"]) == 2
    assert data["totalResults"] == 4


async def test_type_scopes_sources(client: AsyncClient, mocked_search, course_repo) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics", "type": "system-log"})
    assert response.status_code == 200
    assert [r["type"] for r in response.json()["results"]] == ["system-log"]
    course_repo.find_matching.assert_not_awaited()


async def test_navigation_type(client: AsyncClient, mocked_search) -> None:
    response = await client.get("/api/v1/search", params={"q": "logs", "type": "navigation"})
    assert [r["id"] for r in response.json()["results"]] == ["nav-system-logs"]


async def test_invalid_type_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics", "type": "planet"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Request validation failed"
    assert body["details"]


async def test_non_integer_limit_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics", "limit": "many"})
    assert response.status_code == 422


async def test_failing_source_still_returns_200(
    client: AsyncClient, mocked_search, course_repo
) -> None:
    course_repo.find_matching.side_effect = RuntimeError("collection offline")
    response = await client.get("/api/v1/search", params={"q": "physics"})
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["l1"]


async def test_long_query_is_accepted(client: AsyncClient, mocked_search, course_repo) -> None:
    response = await client.get("/api/v1/search", params={"q": "physics " * 100})
    assert response.status_code == 200
    course_repo.find_matching.assert_awaited_once()
