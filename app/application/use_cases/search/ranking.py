"""Result merging and ranking.

Merge order is fixed (user, question, course, agent, system-log, navigation)
whatever order the adapters finished in. Ranking is a single stable
partition: hits whose title contains the query come first, and emission
order is kept inside each group.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.application.dtos.search import AdapterOutcome, SearchResult
from app.domain.enums import SearchResultType

logger = logging.getLogger(__name__)


def merge_results(
    outcomes: Iterable[AdapterOutcome],
    navigation: Iterable[SearchResult],
) -> list[SearchResult]:
    """Concatenate adapter results in fixed source order, then navigation.

    Duplicate ids keep their first occurrence so ids are unique per response.
    """
    by_source = {outcome.source: outcome.results for outcome in outcomes}
    ordered: list[SearchResult] = []
    for source in SearchResultType.data_sources():
        ordered.extend(by_source.get(source, ()))
    ordered.extend(navigation)

    seen: set[str] = set()
    merged: list[SearchResult] = []
    for result in ordered:
        if result.id in seen:
            logger.debug("Dropping duplicate result id %s (%s)", result.id, result.type.value)
            continue
        seen.add(result.id)
        merged.append(result)
    return merged


def title_matches(result: SearchResult, query: str) -> bool:
    return query.lower() in result.title.lower()


def rank_results(results: Iterable[SearchResult], query: str) -> list[SearchResult]:
    """Title matches first; relative order preserved within both groups."""
    matched: list[SearchResult] = []
    rest: list[SearchResult] = []
    for result in results:
        (matched if title_matches(result, query) else rest).append(result)
    return matched + rest
