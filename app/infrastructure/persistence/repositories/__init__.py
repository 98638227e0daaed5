"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.agent_repo import AgentSearchRepository
from app.infrastructure.persistence.repositories.course_repo import CourseSearchRepository
from app.infrastructure.persistence.repositories.question_repo import (
    QuestionSearchRepository,
)
from app.infrastructure.persistence.repositories.system_log_repo import (
    AuditLogSearchRepository,
)
from app.infrastructure.persistence.repositories.user_repo import UserSearchRepository

__all__ = [
    "AgentSearchRepository",
    "AuditLogSearchRepository",
    "CourseSearchRepository",
    "QuestionSearchRepository",
    "UserSearchRepository",
]
