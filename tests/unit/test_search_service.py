"""SearchService tests with mocked repositories and store probe."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.records import AgentRecord, CourseRecord, UserRecord
from app.application.use_cases.search import (
    AgentSearchAdapter,
    AuditLogSearchAdapter,
    CourseSearchAdapter,
    QuestionSearchAdapter,
    SearchService,
    UserSearchAdapter,
    build_default_catalog,
)
from app.domain.enums import SearchResultType
from app.domain.exceptions import SearchFailedException


def _repo(records: list | None = None) -> AsyncMock:
    repo = AsyncMock()
    repo.find_matching.return_value = records or []
    return repo


@pytest.fixture
def repos() -> dict[SearchResultType, AsyncMock]:
    return {
        SearchResultType.USER: _repo(
            [UserRecord(id="u1", email="algebra.fan@uni.edu", role="student", full_name="Sam Lee")]
        ),
        SearchResultType.QUESTION: _repo(),
        SearchResultType.COURSE: _repo(
            [
                CourseRecord(id="c1", code="MAT201", title="Linear Algebra", department="Math", credit=3),
                CourseRecord(id="c2", code="MAT101", title="Calculus", department="Algebra dept"),
            ]
        ),
        SearchResultType.AGENT: _repo(),
        SearchResultType.SYSTEM_LOG: _repo(),
    }


@pytest.fixture
def store() -> AsyncMock:
    return AsyncMock()


def _service(repos, store, **kwargs) -> SearchService:
    adapters = [
        UserSearchAdapter(repos[SearchResultType.USER]),
        QuestionSearchAdapter(repos[SearchResultType.QUESTION]),
        CourseSearchAdapter(repos[SearchResultType.COURSE]),
        AgentSearchAdapter(repos[SearchResultType.AGENT]),
        AuditLogSearchAdapter(repos[SearchResultType.SYSTEM_LOG]),
    ]
    return SearchService(adapters, build_default_catalog(), store, **kwargs)


async def test_short_query_returns_navigation_catalog_without_store(repos, store) -> None:
    service = _service(repos, store)
    response = await service.search("a", limit=3)
    assert len(response.results) == 12
    assert response.total_results == 0
    assert all(r.type is SearchResultType.NAVIGATION for r in response.results)
    store.ping.assert_not_awaited()
    for repo in repos.values():
        repo.find_matching.assert_not_awaited()


async def test_short_query_works_without_configured_store(repos) -> None:
    response = await _service(repos, None).search("")
    assert len(response.results) == 12


async def test_search_queries_every_source_and_ranks_title_matches_first(repos, store) -> None:
    response = await _service(repos, store).search("algebra")
    store.ping.assert_awaited_once()
    for repo in repos.values():
        repo.find_matching.assert_awaited_once()
    # c1's title matches; u1 and c2 only match on other fields.
    assert [r.id for r in response.results] == ["c1", "u1", "c2"]
    assert response.total_results == 3
    assert response.search_time_ms >= 0


async def test_navigation_entries_follow_data_sources(repos, store) -> None:
    response = await _service(repos, store).search("users")
    # Only "Manage Users" matches on title; the rest keep merge order.
    assert [r.id for r in response.results] == ["nav-users", "u1", "c1", "c2", "nav-search"]


async def test_type_filter_runs_only_that_source(repos, store) -> None:
    response = await _service(repos, store).search("algebra", SearchResultType.COURSE)
    repos[SearchResultType.COURSE].find_matching.assert_awaited_once()
    repos[SearchResultType.USER].find_matching.assert_not_awaited()
    assert {r.type for r in response.results} == {SearchResultType.COURSE}


async def test_navigation_type_runs_no_adapters(repos, store) -> None:
    response = await _service(repos, store).search("users", SearchResultType.NAVIGATION)
    for repo in repos.values():
        repo.find_matching.assert_not_awaited()
    assert [r.id for r in response.results] == ["nav-users", "nav-search"]


async def test_limit_truncates_but_total_counts_everything(repos, store) -> None:
    repos[SearchResultType.COURSE].find_matching.return_value = [
        CourseRecord(id=f"c{i}", code=f"ALG{i}", title="Algebra", department=None)
        for i in range(10)
    ]
    response = await _service(repos, store).search("algebra", limit=4)
    assert len(response.results) == 4
    assert response.total_results == 11


async def test_limit_above_maximum_is_clamped(repos, store) -> None:
    repos[SearchResultType.AGENT].find_matching.return_value = [
        AgentRecord(id=f"a{i}", name="algebra bot", display_name=None, description=None)
        for i in range(20)
    ]
    response = await _service(repos, store, max_limit=5).search("algebra", limit=999)
    assert len(response.results) == 5


async def test_missing_store_fails_search(repos) -> None:
    with pytest.raises(SearchFailedException) as exc_info:
        await _service(repos, None).search("algebra")
    assert exc_info.value.message.startswith("Search failed: ")
    assert exc_info.value.error_code == "SEARCH_FAILED"


async def test_unreachable_store_fails_search(repos, store) -> None:
    store.ping.side_effect = ConnectionError("connection refused")
    with pytest.raises(SearchFailedException) as exc_info:
        await _service(repos, store).search("algebra")
    assert exc_info.value.message == "Search failed: connection refused"
    for repo in repos.values():
        repo.find_matching.assert_not_awaited()


async def test_failing_source_does_not_affect_others(repos, store) -> None:
    repos[SearchResultType.USER].find_matching.side_effect = RuntimeError("boom")
    response = await _service(repos, store).search("algebra")
    assert [r.id for r in response.results] == ["c1", "c2"]


async def test_slow_source_is_cut_off(repos, store) -> None:
    async def slow(*args, **kwargs):
        await asyncio.sleep(5)
        return []

    repos[SearchResultType.COURSE].find_matching.side_effect = slow
    service = _service(repos, store, adapter_timeout_seconds=0.05)
    response = await service.search("algebra")
    assert [r.id for r in response.results] == ["u1"]


async def test_duplicate_ids_across_sources_appear_once(repos, store) -> None:
    repos[SearchResultType.AGENT].find_matching.return_value = [
        AgentRecord(id="c1", name="algebra", display_name=None, description=None)
    ]
    response = await _service(repos, store).search("algebra")
    ids = [r.id for r in response.results]
    assert len(ids) == len(set(ids))
    first = next(r for r in response.results if r.id == "c1")
    assert first.type is SearchResultType.COURSE


def test_select_adapters(repos, store) -> None:
    service = _service(repos, store)
    assert len(service.select_adapters(None)) == 5
    assert [a.source for a in service.select_adapters(SearchResultType.AGENT)] == [
        SearchResultType.AGENT
    ]
    assert service.select_adapters(SearchResultType.NAVIGATION) == []
