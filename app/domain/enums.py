"""Domain enumerations for the global search service.

Enums represent fixed sets of domain values (e.g. search result type).
"""

from enum import Enum


class SearchResultType(str, Enum):
    """Kind of record a search hit points to.

    Also the value accepted by the ``type`` query parameter to scope a
    search to a single source.
    """

    USER = "user"
    QUESTION = "question"
    COURSE = "course"
    AGENT = "agent"
    SYSTEM_LOG = "system-log"
    NAVIGATION = "navigation"

    @classmethod
    def data_sources(cls) -> tuple["SearchResultType", ...]:
        """Return store-backed types in fixed merge order (navigation excluded)."""
        return (cls.USER, cls.QUESTION, cls.COURSE, cls.AGENT, cls.SYSTEM_LOG)
