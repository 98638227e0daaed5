"""User search repository: accounts left-joined with profile."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.records import UserRecord, coerce_text
from app.infrastructure.persistence.models.account import Account, Profile
from app.infrastructure.persistence.repositories.base import (
    SubstringSearchRepository,
    any_column_matches,
)


class UserSearchRepository(SubstringSearchRepository[Account, UserRecord]):
    """Matches account email or any profile contact/academic field."""

    search_columns = (
        Account.email,
        Profile.email,
        Profile.full_name,
        Profile.student_id,
        Profile.department,
        Profile.batch,
        Profile.program,
        Profile.phone,
    )

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Account)

    def build_statement(self, pattern: str, limit: int) -> Select:
        return (
            select(Account, Profile)
            .outerjoin(Profile, Profile.id == Account.id)
            .where(any_column_matches(self.search_columns, pattern))
            .limit(limit)
        )

    def _rows_to_records(self, result: Any) -> list[UserRecord]:
        return [self._to_record(row) for row in result.all()]

    def _to_record(self, row: Any) -> UserRecord:
        account, profile = row
        if profile is None:
            return UserRecord(
                id=str(account.id),
                email=coerce_text(account.email),
                role=coerce_text(account.role),
            )
        return UserRecord(
            id=str(account.id),
            email=coerce_text(account.email),
            role=coerce_text(account.role),
            full_name=coerce_text(profile.full_name),
            profile_email=coerce_text(profile.email),
            student_id=coerce_text(profile.student_id),
            department=coerce_text(profile.department),
            batch=coerce_text(profile.batch),
            program=coerce_text(profile.program),
            phone=coerce_text(profile.phone),
        )
