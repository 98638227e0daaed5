"""Source record DTOs: one frozen shape per searched collection.

Store rows are loosely typed (free-text uploads, optional fields). Repositories
coerce them into these shapes before any mapping: ids and text-like values
become str, blank strings become None.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def coerce_text(value: Any) -> str | None:
    """Return value as a stripped str, or None when missing or blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class UserRecord:
    """Account joined with its optional profile."""

    id: str
    email: str | None
    role: str | None
    full_name: str | None = None
    profile_email: str | None = None
    student_id: str | None = None
    department: str | None = None
    batch: str | None = None
    program: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class QuestionRecord:
    """One question part of an exam paper."""

    id: str
    question: str | None
    course_title: str | None
    course_code: str | None
    semester_term: str | None
    exam_type: str | None
    description_content: str | None
    short: str | None
    question_number: str | None
    sub_question: str | None
    marks: int | None = None
    has_image: bool | None = None
    has_description: bool | None = None


@dataclass(frozen=True)
class CourseRecord:
    id: str
    code: str | None
    title: str | None
    department: str | None
    credit: float | None = None


@dataclass(frozen=True)
class AgentRecord:
    id: str
    name: str | None
    display_name: str | None
    description: str | None
    is_active: bool = False


@dataclass(frozen=True)
class AuditLogRecord:
    """Admin action from system_logs."""

    id: str
    admin_name: str | None
    action: str | None
    resource_type: str | None
    description: str | None
    method: str | None
    success: bool = False
    timestamp: datetime | None = None
