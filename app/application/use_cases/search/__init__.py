"""Global search: query normalization, source adapters, navigation, ranking."""

from app.application.use_cases.search.adapters import (
    AgentSearchAdapter,
    AuditLogSearchAdapter,
    CourseSearchAdapter,
    QuestionSearchAdapter,
    SourceAdapter,
    UserSearchAdapter,
)
from app.application.use_cases.search.navigation import (
    DEFAULT_NAVIGATION_ENTRIES,
    NavigationCatalog,
    NavigationEntry,
    build_default_catalog,
)
from app.application.use_cases.search.query import normalize_query
from app.application.use_cases.search.service import SearchService

__all__ = [
    "AgentSearchAdapter",
    "AuditLogSearchAdapter",
    "CourseSearchAdapter",
    "DEFAULT_NAVIGATION_ENTRIES",
    "NavigationCatalog",
    "NavigationEntry",
    "QuestionSearchAdapter",
    "SearchService",
    "SourceAdapter",
    "UserSearchAdapter",
    "build_default_catalog",
    "normalize_query",
]
