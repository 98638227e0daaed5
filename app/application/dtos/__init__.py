"""Application DTOs (no ORM dependency)."""

from app.application.dtos.records import (
    AgentRecord,
    AuditLogRecord,
    CourseRecord,
    QuestionRecord,
    UserRecord,
)
from app.application.dtos.search import (
    AdapterOutcome,
    SearchQuery,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "AdapterOutcome",
    "AgentRecord",
    "AuditLogRecord",
    "CourseRecord",
    "QuestionRecord",
    "SearchQuery",
    "SearchResponse",
    "SearchResult",
    "UserRecord",
]
