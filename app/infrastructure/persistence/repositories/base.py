"""Base repository: case-insensitive multi-field substring search over one table."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from app.infrastructure.persistence.database import Base

# Escape character used by the search pattern (see use_cases.search.query).
LIKE_ESCAPE = "\\"

ModelType = TypeVar("ModelType", bound=Base)
RecordType = TypeVar("RecordType")


def any_column_matches(columns: Sequence[InstrumentedAttribute], pattern: str) -> Any:
    """OR of `column ILIKE pattern ESCAPE '\\'` over columns."""
    return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))


class SubstringSearchRepository(ABC, Generic[ModelType, RecordType]):
    """Read-only repository with find_matching(pattern, limit).

    Subclasses set search_columns and implement _to_record (one result row to
    one record); override build_statement / _rows_to_records for joins or ordering. Each call opens
    its own session so several repositories can query concurrently.
    """

    search_columns: tuple[InstrumentedAttribute, ...] = ()

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: type[ModelType],
    ) -> None:
        self._session_factory = session_factory
        self.model = model

    def build_statement(self, pattern: str, limit: int) -> Select:
        """SELECT rows matching pattern on any search column, capped by LIMIT."""
        return (
            select(self.model)
            .where(any_column_matches(self.search_columns, pattern))
            .limit(limit)
        )

    async def find_matching(self, pattern: str, limit: int) -> list[RecordType]:
        """Return at most limit records where any search column matches pattern."""
        stmt = self.build_statement(pattern, limit)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return self._rows_to_records(result)

    def _rows_to_records(self, result: Any) -> list[RecordType]:
        return [self._to_record(row) for row in result.scalars().all()]

    @abstractmethod
    def _to_record(self, row: Any) -> RecordType:
        """Map one row (an ORM instance, or a Row for joined selects) to a record."""
