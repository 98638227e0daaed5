"""Query normalization: trim, length gate, literal pattern, limit clamp."""

from __future__ import annotations

from app.application.dtos.search import SearchQuery
from app.domain.enums import SearchResultType

DEFAULT_LIMIT = 150
MAX_LIMIT = 300
MIN_QUERY_LENGTH = 2

# Escape char must be replaced first so later escapes are not doubled.
_PATTERN_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("%", "\\%"),
    ("_", "\\_"),
)


def escape_pattern(text: str) -> str:
    """Escape pattern metacharacters so every character of text matches literally."""
    for raw, escaped in _PATTERN_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def clamp_limit(
    limit: int | None,
    default: int = DEFAULT_LIMIT,
    maximum: int = MAX_LIMIT,
) -> int:
    """Clamp a requested limit into [1, maximum]; None means default."""
    if limit is None:
        return default
    return max(1, min(limit, maximum))


def normalize_query(
    raw_text: str | None,
    type_filter: SearchResultType | None = None,
    limit: int | None = None,
    *,
    min_length: int = MIN_QUERY_LENGTH,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> SearchQuery:
    """Build a SearchQuery from request input.

    Queries shorter than min_length after trimming get an empty
    normalized_pattern (SearchQuery.is_short); callers skip the store for them.
    """
    text = (raw_text or "").strip()
    pattern = f"%{escape_pattern(text)}%" if len(text) >= min_length else ""
    return SearchQuery(
        raw_text=text,
        normalized_pattern=pattern,
        type_filter=type_filter,
        limit=clamp_limit(limit, default=default_limit, maximum=max_limit),
    )
