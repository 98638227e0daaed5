"""Search API: federated search across users, questions, courses, agents, logs."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_search_service
from app.application.use_cases.search import SearchService
from app.core.limiter import limit_search
from app.domain.enums import SearchResultType
from app.schemas.search import SearchErrorResponse, SearchResponse

router = APIRouter()

SearchTypeParam = Literal[
    "", "user", "question", "course", "agent", "system-log", "navigation"
]


@router.get(
    "",
    response_model=SearchResponse,
    responses={500: {"description": "Search store unavailable", "model": SearchErrorResponse}},
)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", description="Free-text query (2+ characters)"),
    limit: int | None = Query(
        None, description="Maximum results; clamped to 1..300 (default 150)"
    ),
    type_: SearchTypeParam = Query(
        "", alias="type", description="Restrict data sources to one type"
    ),
) -> SearchResponse:
    """Search all sources; navigation links are always included when they match.

    Queries shorter than 2 characters return the full navigation catalog
    with totalResults 0.
    """
    type_filter = SearchResultType(type_) if type_ else None
    response = await search_svc.search(q=q, type_filter=type_filter, limit=limit)
    return SearchResponse.from_dto(response)
