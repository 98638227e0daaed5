"""Search API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.search import SearchResponse as SearchResponseDTO
from app.application.dtos.search import SearchResult as SearchResultDTO
from app.domain.enums import SearchResultType


class SearchResultResponse(BaseModel):
    """Single hit in the unified result schema."""

    id: str
    title: str
    description: str
    type: SearchResultType = Field(
        ..., description="user | question | course | agent | system-log | navigation"
    )
    url: str | None = Field(None, description="Deep link into the console")
    metadata: dict[str, Any] = Field(default_factory=dict)
    relevance: float | None = None

    @classmethod
    def from_dto(cls, result: SearchResultDTO) -> "SearchResultResponse":
        return cls(
            id=result.id,
            title=result.title,
            description=result.description,
            type=result.type,
            url=result.url,
            metadata=dict(result.metadata),
            relevance=result.relevance,
        )


class SearchResponse(BaseModel):
    """Ranked hits (at most limit), pre-truncation total, elapsed milliseconds."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[SearchResultResponse]
    total_results: int = Field(..., alias="totalResults")
    search_time: int = Field(..., alias="searchTime", description="Milliseconds")

    @classmethod
    def from_dto(cls, response: SearchResponseDTO) -> "SearchResponse":
        return cls(
            results=[SearchResultResponse.from_dto(r) for r in response.results],
            total_results=response.total_results,
            search_time=response.search_time_ms,
        )


class SearchErrorResponse(BaseModel):
    """Error body for a search that could not run."""

    error: str
