"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the search use case. The use case is built
from infrastructure implementations here; routes depend only on these
dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.use_cases.search import (
    AgentSearchAdapter,
    AuditLogSearchAdapter,
    CourseSearchAdapter,
    NavigationCatalog,
    QuestionSearchAdapter,
    SearchService,
    SourceAdapter,
    UserSearchAdapter,
    build_default_catalog,
)
from app.core.config import Settings, get_settings
from app.domain.exceptions import SqlNotConfiguredException
from app.infrastructure.persistence.database import (
    SqlStoreConnection,
    get_session_factory,
)
from app.infrastructure.persistence.repositories import (
    AgentSearchRepository,
    AuditLogSearchRepository,
    CourseSearchRepository,
    QuestionSearchRepository,
    UserSearchRepository,
)


def get_navigation_catalog(request: Request) -> NavigationCatalog:
    """Catalog built at startup (app.state); falls back to the default catalog."""
    catalog = getattr(request.app.state, "navigation_catalog", None)
    if catalog is None:
        catalog = build_default_catalog()
        request.app.state.navigation_catalog = catalog
    return catalog


def get_store_connection() -> SqlStoreConnection | None:
    """Store probe, or None when DATABASE_URL is not configured."""
    if not get_settings().database_url:
        return None
    try:
        return SqlStoreConnection(get_session_factory())
    except SqlNotConfiguredException:
        return None


def build_search_adapters() -> list[SourceAdapter]:
    """One adapter per searchable collection, sharing the session factory."""
    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        return []
    return [
        UserSearchAdapter(UserSearchRepository(session_factory)),
        QuestionSearchAdapter(QuestionSearchRepository(session_factory)),
        CourseSearchAdapter(CourseSearchRepository(session_factory)),
        AgentSearchAdapter(AgentSearchRepository(session_factory)),
        AuditLogSearchAdapter(AuditLogSearchRepository(session_factory)),
    ]


async def get_search_service(
    settings: Annotated[Settings, Depends(get_settings)],
    navigation: Annotated[NavigationCatalog, Depends(get_navigation_catalog)],
    store: Annotated[SqlStoreConnection | None, Depends(get_store_connection)],
) -> SearchService:
    """Search use case (federated across users, questions, courses, agents, logs).

    Without a configured store the service still answers too-short queries
    (navigation only); longer queries fail with SearchFailedException.
    """
    return SearchService(
        adapters=build_search_adapters() if store is not None else [],
        navigation=navigation,
        store=store,
        min_query_length=settings.search_min_query_length,
        default_limit=settings.search_default_limit,
        max_limit=settings.search_max_limit,
        adapter_timeout_seconds=settings.search_adapter_timeout_seconds,
    )
