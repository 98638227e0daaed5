"""Source adapters: query one collection and map hits to SearchResult.

Every adapter has a fixed cap passed to the repository (applied as a store
LIMIT). run() never raises for source failures; it returns an AdapterOutcome
carrying either the results or the error text, so one unreachable collection
only empties its own contribution.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from app.application.dtos.records import (
    AgentRecord,
    AuditLogRecord,
    CourseRecord,
    QuestionRecord,
    UserRecord,
)
from app.application.dtos.search import AdapterOutcome, SearchQuery, SearchResult
from app.application.interfaces.repositories import ISourceRepository
from app.application.services.question_enricher import enrich_question
from app.domain.enums import SearchResultType
from app.shared.telemetry.tracing import TracedOperation

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType")


def _format_number(value: float | int | None) -> str:
    if value is None:
        return "0"
    return f"{value:g}"


class SourceAdapter(ABC, Generic[RecordType]):
    """Runs one repository search and maps each record to a result."""

    source: SearchResultType
    cap: int

    def __init__(self, repo: ISourceRepository[RecordType]) -> None:
        self._repo = repo

    async def run(self, query: SearchQuery) -> AdapterOutcome:
        """Search this source for query; failures become an empty, failed outcome."""
        try:
            async with TracedOperation(
                f"search.adapter.{self.source.value}",
                {"search.source": self.source.value, "search.cap": self.cap},
            ) as op:
                records = await self._repo.find_matching(
                    query.normalized_pattern, self.cap
                )
                results = [
                    result
                    for result in (self.to_result(r, query.raw_text) for r in records)
                    if result is not None
                ]
                if op.span is not None:
                    op.span.set_attribute("search.result_count", len(results))
        except Exception as exc:
            logger.exception("%s search failed", self.source.value)
            return AdapterOutcome(
                source=self.source,
                results=[],
                error=str(exc) or exc.__class__.__name__,
            )
        logger.debug(
            "%s search: %d records, %d results",
            self.source.value,
            len(records),
            len(results),
        )
        return AdapterOutcome(source=self.source, results=results)

    @abstractmethod
    def to_result(self, record: RecordType, query: str) -> SearchResult | None:
        """Map one record; None drops it."""


class UserSearchAdapter(SourceAdapter[UserRecord]):
    source = SearchResultType.USER
    cap = 50

    def to_result(self, record: UserRecord, query: str) -> SearchResult:
        role = record.role or "unknown"
        description = (
            f"{record.email or 'No email'} | {role[:1].upper()}{role[1:]}"
            f" - {record.department or 'No department'}"
        )
        if record.student_id:
            description += f" ({record.student_id})"
        return SearchResult(
            id=record.id,
            title=record.full_name or record.email or record.id,
            description=description,
            type=self.source,
            url=f"/dashboard/users/{record.id}",
            metadata={
                "email": record.email,
                "role": record.role,
                "department": record.department,
                "student_id": record.student_id,
                "batch": record.batch,
                "phone": record.phone,
                "program": record.program,
            },
        )


class QuestionSearchAdapter(SourceAdapter[QuestionRecord]):
    """Question parts; enrichment (term code, tagging, URL) in question_enricher."""

    source = SearchResultType.QUESTION
    cap = 50

    def to_result(self, record: QuestionRecord, query: str) -> SearchResult | None:
        result = enrich_question(record, query)
        if result is None:
            logger.debug(
                "Skipping question %s: missing course_code or question_number",
                record.id,
            )
        return result


class CourseSearchAdapter(SourceAdapter[CourseRecord]):
    source = SearchResultType.COURSE
    cap = 30

    def to_result(self, record: CourseRecord, query: str) -> SearchResult:
        return SearchResult(
            id=record.id,
            title=f"{record.code or 'Unknown'} - {record.title or 'Untitled'}",
            description=(
                f"{record.department or 'No department'}"
                f" | {_format_number(record.credit)} credits"
            ),
            type=self.source,
            url="/dashboard/courses",
            metadata={
                "code": record.code,
                "title": record.title,
                "department": record.department,
                "credit": record.credit,
            },
        )


class AgentSearchAdapter(SourceAdapter[AgentRecord]):
    source = SearchResultType.AGENT
    cap = 20

    def to_result(self, record: AgentRecord, query: str) -> SearchResult:
        status = "Active" if record.is_active else "Inactive"
        return SearchResult(
            id=record.id,
            title=record.display_name or record.name or record.id,
            description=f"AI Agent | {record.description or 'No description'} | {status}",
            type=self.source,
            url=f"/dashboard/agents/{record.id}/edit",
            metadata={
                "name": record.name,
                "display_name": record.display_name,
                "is_active": record.is_active,
                "description": record.description,
            },
        )


class AuditLogSearchAdapter(SourceAdapter[AuditLogRecord]):
    """Admin audit log, surfaced as type system-log; repository orders newest first."""

    source = SearchResultType.SYSTEM_LOG
    cap = 30

    def to_result(self, record: AuditLogRecord, query: str) -> SearchResult:
        metadata: dict[str, Any] = {
            "admin_name": record.admin_name,
            "method": record.method,
            "resource_type": record.resource_type,
            "success": record.success,
            "timestamp": record.timestamp.isoformat() if record.timestamp else None,
        }
        return SearchResult(
            id=record.id,
            title=f"{record.action or 'Unknown'} - {record.resource_type or 'Unknown'}",
            description=(
                f"{record.description or 'No description'}"
                f" | By {record.admin_name or 'Unknown'}"
                f" | {'Success' if record.success else 'Failed'}"
            ),
            type=self.source,
            url="/dashboard/system-logs",
            metadata=metadata,
        )
