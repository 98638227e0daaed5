"""Persistence models: read-only ORM views of the admin console collections."""

from app.infrastructure.persistence.models.account import Account, Profile
from app.infrastructure.persistence.models.agent import Agent
from app.infrastructure.persistence.models.course import Course
from app.infrastructure.persistence.models.question_part import QuestionPart
from app.infrastructure.persistence.models.system_log import SystemLog

__all__ = [
    "Account",
    "Agent",
    "Course",
    "Profile",
    "QuestionPart",
    "SystemLog",
]
