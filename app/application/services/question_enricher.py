"""Question hit enrichment: validity gate, matched-field tagging, deep link.

Turns a QuestionRecord into a SearchResult. Records without both a course
code and a question number cannot be linked to a question page and are
dropped (enrich_question returns None).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.application.dtos.records import QuestionRecord
from app.application.dtos.search import SearchResult
from app.application.services.term_code import derive_term_code
from app.domain.enums import SearchResultType

PREVIEW_MAX_CHARS = 120
NO_TEXT_PLACEHOLDER = "No question text available"
QUESTION_URL_PREFIX = "/dashboard/questions"


@dataclass(frozen=True)
class MatchedText:
    """Text shown for a hit and the field it came from ("" when untagged)."""

    field: str
    text: str

    @property
    def tag(self) -> str:
        return f"[{self.field.upper()}]" if self.field else ""


def is_addressable(record: QuestionRecord) -> bool:
    """True when the record has the course code and question number a URL needs."""
    return bool(record.course_code) and bool(record.question_number)


def match_field(record: QuestionRecord, query: str) -> MatchedText:
    """Pick the text to display, preferring the field that contains the query.

    Question text is tested before description. Without a match the first
    present of question/description is used (still tagged), then the course
    title or a placeholder (untagged).
    """
    needle = query.lower()
    if record.question and needle in record.question.lower():
        return MatchedText("question", record.question)
    if record.description_content and needle in record.description_content.lower():
        return MatchedText("description", record.description_content)
    if record.question:
        return MatchedText("question", record.question)
    if record.description_content:
        return MatchedText("description", record.description_content)
    return MatchedText("", record.course_title or NO_TEXT_PLACEHOLDER)


def make_preview(text: str, max_chars: int = PREVIEW_MAX_CHARS) -> str:
    """First max_chars characters, with "..." appended when truncated."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def exam_segment(exam_type: str | None) -> str:
    """URL segment for the exam: "final" for finals, "mid" for everything else."""
    return "final" if (exam_type or "").strip().lower() == "final" else "mid"


def question_url(record: QuestionRecord, term_code: str) -> str:
    return (
        f"{QUESTION_URL_PREFIX}/{record.course_code}/{exam_segment(record.exam_type)}"
        f"/trimester/{term_code}"
    )


def _title(record: QuestionRecord) -> str:
    label = record.short or record.course_code or "Unknown"
    number = record.question_number
    if record.sub_question:
        number = f"{number}-{record.sub_question}"
    return f"{label} - {record.semester_term or 'Unknown'} - {number}"


def enrich_question(record: QuestionRecord, query: str) -> SearchResult | None:
    """Map a question record to a search hit, or None if it is not addressable."""
    if not is_addressable(record):
        return None

    term_code = derive_term_code(record.semester_term)
    matched = match_field(record, query)
    preview = make_preview(matched.text)
    description = " | ".join(
        [
            f"{matched.tag} {preview}".strip(),
            record.exam_type or "Unknown",
            f"{record.marks or 0} marks",
            term_code,
        ]
    )
    metadata: dict[str, Any] = {
        "course_code": record.course_code,
        "course_title": record.course_title,
        "exam_type": record.exam_type,
        "marks": record.marks,
        "semester_term": record.semester_term,
        "has_image": record.has_image,
        "has_description": record.has_description,
        "trimester_code": term_code,
        "question_number": record.question_number,
        "sub_question": record.sub_question,
        "question": record.question,
        "short": record.short,
        "description_content": record.description_content,
        "matched_field": matched.field,
        "full_matched_text": matched.text,
    }
    return SearchResult(
        id=record.id,
        title=_title(record),
        description=description,
        type=SearchResultType.QUESTION,
        url=question_url(record, term_code),
        metadata=metadata,
    )
