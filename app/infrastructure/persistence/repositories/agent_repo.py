"""Agent search repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.records import AgentRecord, coerce_text
from app.infrastructure.persistence.models.agent import Agent
from app.infrastructure.persistence.repositories.base import SubstringSearchRepository


class AgentSearchRepository(SubstringSearchRepository[Agent, AgentRecord]):
    """Matches agent names, description, or system prompt."""

    search_columns = (
        Agent.name,
        Agent.display_name,
        Agent.description,
        Agent.system_prompt,
    )

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Agent)

    def _to_record(self, row: Agent) -> AgentRecord:
        return AgentRecord(
            id=str(row.id),
            name=coerce_text(row.name),
            display_name=coerce_text(row.display_name),
            description=coerce_text(row.description),
            is_active=bool(row.is_active),
        )
