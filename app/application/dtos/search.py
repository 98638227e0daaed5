"""DTOs for global search (no dependency on ORM or HTTP schemas)."""

from dataclasses import dataclass, field
from typing import Any

from app.domain.enums import SearchResultType


@dataclass(frozen=True)
class SearchQuery:
    """Normalized search request.

    raw_text is the trimmed user input; normalized_pattern is the escaped,
    wildcard-wrapped pattern handed to store predicates.
    """

    raw_text: str
    normalized_pattern: str
    type_filter: SearchResultType | None
    limit: int

    @property
    def is_short(self) -> bool:
        """True when the query was too short to search (navigation-only path)."""
        return not self.normalized_pattern


@dataclass(frozen=True)
class SearchResult:
    """Single hit in the unified result schema."""

    id: str
    title: str
    description: str
    type: SearchResultType
    url: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    relevance: float | None = None


@dataclass(frozen=True)
class AdapterOutcome:
    """Result of running one source adapter: hits, or the error that replaced them."""

    source: SearchResultType
    results: list[SearchResult]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SearchResponse:
    """Ranked, truncated hits plus the pre-truncation count and elapsed time."""

    results: list[SearchResult]
    total_results: int
    search_time_ms: int
