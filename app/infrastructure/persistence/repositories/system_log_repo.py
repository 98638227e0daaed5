"""Admin audit log search repository (system_logs, newest first)."""

from __future__ import annotations

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.records import AuditLogRecord, coerce_text
from app.infrastructure.persistence.models.system_log import SystemLog
from app.infrastructure.persistence.repositories.base import SubstringSearchRepository


class AuditLogSearchRepository(SubstringSearchRepository[SystemLog, AuditLogRecord]):
    """Matches admin identity, description, resource, action or request line."""

    search_columns = (
        SystemLog.admin_name,
        SystemLog.admin_email,
        SystemLog.description,
        SystemLog.resource_type,
        SystemLog.action,
        SystemLog.method,
        SystemLog.endpoint,
    )

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, SystemLog)

    def build_statement(self, pattern: str, limit: int) -> Select:
        # ORDER BY is applied before LIMIT, so the cap keeps the newest matches.
        return (
            super()
            .build_statement(pattern, limit)
            .order_by(SystemLog.timestamp.desc())
        )

    def _to_record(self, row: SystemLog) -> AuditLogRecord:
        return AuditLogRecord(
            id=str(row.id),
            admin_name=coerce_text(row.admin_name),
            action=coerce_text(row.action),
            resource_type=coerce_text(row.resource_type),
            description=coerce_text(row.description),
            method=coerce_text(row.method),
            success=bool(row.success),
            timestamp=row.timestamp,
        )
