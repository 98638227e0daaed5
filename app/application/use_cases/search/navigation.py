"""Static navigation index: fixed catalog of console feature pages.

The catalog is built once at startup (build_default_catalog) and injected
into SearchService; it never touches the store.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from app.application.dtos.search import SearchResult
from app.domain.enums import SearchResultType


@dataclass(frozen=True)
class NavigationEntry:
    id: str
    title: str
    description: str
    url: str

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()

    def to_result(self) -> SearchResult:
        return SearchResult(
            id=self.id,
            title=self.title,
            description=self.description,
            type=SearchResultType.NAVIGATION,
            url=self.url,
        )


class NavigationCatalog:
    """Immutable, ordered set of navigation entries."""

    def __init__(self, entries: Iterable[NavigationEntry]) -> None:
        self._entries = tuple(entries)

    @property
    def entries(self) -> tuple[NavigationEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def all_results(self) -> list[SearchResult]:
        """Every entry, in catalog order (used for too-short queries)."""
        return [entry.to_result() for entry in self._entries]

    def filter(self, query: str) -> list[SearchResult]:
        """Entries whose title or description contains query, in catalog order."""
        return [entry.to_result() for entry in self._entries if entry.matches(query)]


DEFAULT_NAVIGATION_ENTRIES: tuple[NavigationEntry, ...] = (
    NavigationEntry(
        "nav-dashboard",
        "Dashboard",
        "View system overview, analytics, and recent activity",
        "/dashboard",
    ),
    NavigationEntry(
        "nav-users",
        "Manage Users",
        "View, create, edit, and manage user accounts",
        "/dashboard/users",
    ),
    NavigationEntry(
        "nav-questions",
        "Question Bank",
        "Browse and manage exam questions",
        "/dashboard/questions",
    ),
    NavigationEntry(
        "nav-add-question",
        "Add Questions",
        "Add new questions to the question bank",
        "/dashboard/add-question",
    ),
    NavigationEntry(
        "nav-courses",
        "Course Management",
        "Manage courses, departments, and academic programs",
        "/dashboard/courses",
    ),
    NavigationEntry(
        "nav-agents",
        "AI Agents",
        "Configure and manage AI agents",
        "/dashboard/agents",
    ),
    NavigationEntry(
        "nav-create-agent",
        "Create Agent",
        "Create new AI agents with custom configurations",
        "/dashboard/create-agent",
    ),
    NavigationEntry(
        "nav-upload",
        "Upload Content",
        "Bulk upload questions and course materials",
        "/dashboard/upload",
    ),
    NavigationEntry(
        "nav-system-logs",
        "System Logs",
        "View system activity logs and admin actions",
        "/dashboard/system-logs",
    ),
    NavigationEntry(
        "nav-update-embeddings",
        "Update Embeddings",
        "Refresh search index and vector embeddings",
        "/dashboard/update-embeddings",
    ),
    NavigationEntry(
        "nav-search",
        "Global Search",
        "Search across users, questions, courses, and more",
        "/dashboard/search",
    ),
    NavigationEntry(
        "nav-help",
        "Help & Documentation",
        "Get help and view system documentation",
        "/dashboard/help",
    ),
)


def build_default_catalog() -> NavigationCatalog:
    return NavigationCatalog(DEFAULT_NAVIGATION_ENTRIES)
