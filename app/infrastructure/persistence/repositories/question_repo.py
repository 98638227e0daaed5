"""Question part search repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.records import QuestionRecord, coerce_text
from app.infrastructure.persistence.models.question_part import QuestionPart
from app.infrastructure.persistence.repositories.base import SubstringSearchRepository


class QuestionSearchRepository(SubstringSearchRepository[QuestionPart, QuestionRecord]):
    """Matches question text, course, term, exam type and numbering fields."""

    search_columns = (
        QuestionPart.question,
        QuestionPart.course_title,
        QuestionPart.course_code,
        QuestionPart.semester_term,
        QuestionPart.exam_type,
        QuestionPart.description_content,
        QuestionPart.short,
        QuestionPart.question_number,
        QuestionPart.sub_question,
    )

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, QuestionPart)

    def _to_record(self, row: QuestionPart) -> QuestionRecord:
        return QuestionRecord(
            id=str(row.id),
            question=coerce_text(row.question),
            course_title=coerce_text(row.course_title),
            course_code=coerce_text(row.course_code),
            semester_term=coerce_text(row.semester_term),
            exam_type=coerce_text(row.exam_type),
            description_content=coerce_text(row.description_content),
            short=coerce_text(row.short),
            question_number=coerce_text(row.question_number),
            sub_question=coerce_text(row.sub_question),
            marks=row.marks,
            has_image=row.has_image,
            has_description=row.has_description,
        )
