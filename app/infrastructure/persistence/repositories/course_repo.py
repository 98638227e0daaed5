"""Course search repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.records import CourseRecord, coerce_text
from app.infrastructure.persistence.models.course import Course
from app.infrastructure.persistence.repositories.base import SubstringSearchRepository


class CourseSearchRepository(SubstringSearchRepository[Course, CourseRecord]):
    """Matches course code, title or department."""

    search_columns = (Course.code, Course.title, Course.department)

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Course)

    def _to_record(self, row: Course) -> CourseRecord:
        return CourseRecord(
            id=str(row.id),
            code=coerce_text(row.code),
            title=coerce_text(row.title),
            department=coerce_text(row.department),
            credit=row.credit,
        )
