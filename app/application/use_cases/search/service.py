"""Global search use case: fan out to source adapters, merge, rank, truncate."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

from app.application.dtos.search import (
    AdapterOutcome,
    SearchQuery,
    SearchResponse,
)
from app.application.interfaces.repositories import IStoreConnection
from app.application.use_cases.search.adapters import SourceAdapter
from app.application.use_cases.search.navigation import NavigationCatalog
from app.application.use_cases.search.query import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_QUERY_LENGTH,
    normalize_query,
)
from app.application.use_cases.search.ranking import merge_results, rank_results
from app.domain.enums import SearchResultType
from app.domain.exceptions import SearchFailedException

logger = logging.getLogger(__name__)


class SearchService:
    """Federated search across users, questions, courses, agents and audit logs.

    Adapters run concurrently and are joined before merging. A failing or
    slow adapter contributes no results; only an unavailable store
    (store is None or its ping fails) aborts the search.
    """

    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        navigation: NavigationCatalog,
        store: IStoreConnection | None,
        *,
        min_query_length: int = MIN_QUERY_LENGTH,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
        adapter_timeout_seconds: float | None = None,
    ) -> None:
        self.adapters = tuple(adapters)
        self.navigation = navigation
        self.store = store
        self.min_query_length = min_query_length
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.adapter_timeout_seconds = adapter_timeout_seconds

    async def search(
        self,
        q: str | None,
        type_filter: SearchResultType | None = None,
        limit: int | None = None,
    ) -> SearchResponse:
        """Search every source (or only type_filter's) and return ranked hits.

        Too-short queries return the whole navigation catalog with
        total_results 0 and never touch the store.

        Raises:
            SearchFailedException: the store is not configured or unreachable.
        """
        started = time.perf_counter()
        query = normalize_query(
            q,
            type_filter,
            limit,
            min_length=self.min_query_length,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )
        if query.is_short:
            return SearchResponse(
                results=self.navigation.all_results(),
                total_results=0,
                search_time_ms=_elapsed_ms(started),
            )

        await self._check_store()
        outcomes = await self._run_adapters(query)
        merged = merge_results(outcomes, self.navigation.filter(query.raw_text))
        ranked = rank_results(merged, query.raw_text)
        response = SearchResponse(
            results=ranked[: query.limit],
            total_results=len(ranked),
            search_time_ms=_elapsed_ms(started),
        )
        logger.info(
            "Search q=%r type=%s: %d results (%d total), failed sources=%s, %dms",
            query.raw_text,
            query.type_filter.value if query.type_filter else "all",
            len(response.results),
            response.total_results,
            [o.source.value for o in outcomes if not o.ok] or "none",
            response.search_time_ms,
        )
        return response

    def select_adapters(self, type_filter: SearchResultType | None) -> list[SourceAdapter]:
        """All adapters when unscoped; the matching one otherwise (none for navigation)."""
        if type_filter is None:
            return list(self.adapters)
        return [adapter for adapter in self.adapters if adapter.source == type_filter]

    async def _check_store(self) -> None:
        if self.store is None:
            raise SearchFailedException("search store is not configured")
        try:
            await self.store.ping()
        except Exception as exc:
            logger.exception("Search store unreachable")
            raise SearchFailedException(str(exc) or exc.__class__.__name__) from exc

    async def _run_adapters(self, query: SearchQuery) -> list[AdapterOutcome]:
        adapters = self.select_adapters(query.type_filter)
        if not adapters:
            return []
        return list(
            await asyncio.gather(*(self._run_adapter(a, query) for a in adapters))
        )

    async def _run_adapter(
        self, adapter: SourceAdapter, query: SearchQuery
    ) -> AdapterOutcome:
        try:
            return await asyncio.wait_for(
                adapter.run(query), timeout=self.adapter_timeout_seconds
            )
        except TimeoutError:
            logger.warning(
                "%s search timed out after %ss",
                adapter.source.value,
                self.adapter_timeout_seconds,
            )
            return AdapterOutcome(
                source=adapter.source,
                results=[],
                error=f"timed out after {self.adapter_timeout_seconds}s",
            )


def _elapsed_ms(started: float) -> int:
    return int(round((time.perf_counter() - started) * 1000))


