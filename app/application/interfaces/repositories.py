"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

RecordT_co = TypeVar("RecordT_co", covariant=True)


class ISourceRepository(Protocol[RecordT_co]):
    """Read-only collection searched by one adapter."""

    async def find_matching(self, pattern: str, limit: int) -> list[RecordT_co]:
        """Return at most limit records where any searched field matches pattern.

        pattern is an escaped, case-insensitive substring pattern (see
        app.application.use_cases.search.query). The limit is applied by the
        store, never after fetching.
        """
        ...


class IStoreConnection(Protocol):
    """Store reachability probe used before fan-out and by readiness checks."""

    async def ping(self) -> None:
        """Return when the store answers; raise on any connection failure."""
        ...
