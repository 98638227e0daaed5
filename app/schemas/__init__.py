"""API request/response schemas (pydantic)."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.search import (
    SearchErrorResponse,
    SearchResponse,
    SearchResultResponse,
)

__all__ = [
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchErrorResponse",
    "SearchResponse",
    "SearchResultResponse",
]
