"""Academic term code derivation from free-text semester labels.

A term code is `{YY}{season digit}`: fall=1, spring=2, summer=3
(e.g. "Fall 2024" -> "241"). The semester_term field is free text entered at
upload time and is not validated on write, so this is a best-effort heuristic:
unanticipated formats fall back to the defaults below rather than failing.
"""

from __future__ import annotations

import re

FALLBACK_TERM_CODE = "241"
DEFAULT_YEAR = "2024"
DEFAULT_SEASON_DIGIT = "1"

# Checked in order; first keyword found in the lowered text wins.
SEASON_DIGITS: tuple[tuple[str, str], ...] = (
    ("fall", "1"),
    ("spring", "2"),
    ("summer", "3"),
)

_EXPLICIT_CODE_RE = re.compile(r"\b(\d{3})\b", re.ASCII)
_YEAR_RE = re.compile(r"(\d{4})", re.ASCII)


def derive_term_code(semester_term: str | None) -> str:
    """Return the 3-character term code for a semester label.

    An explicit standalone 3-digit token ("Trimester 233") wins. Otherwise a
    4-digit year and a season keyword are combined, defaulting to 2024 and
    fall. Missing or blank text yields FALLBACK_TERM_CODE.
    """
    if not semester_term or not semester_term.strip():
        return FALLBACK_TERM_CODE

    explicit = _EXPLICIT_CODE_RE.search(semester_term)
    if explicit:
        return explicit.group(1)

    year_match = _YEAR_RE.search(semester_term)
    year = year_match.group(1) if year_match else DEFAULT_YEAR
    lowered = semester_term.lower()
    season_digit = next(
        (digit for keyword, digit in SEASON_DIGITS if keyword in lowered),
        DEFAULT_SEASON_DIGIT,
    )
    return f"{year[-2:]}{season_digit}"
