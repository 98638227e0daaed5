"""Application services: pure domain helpers used by the search use case."""

from app.application.services.question_enricher import enrich_question
from app.application.services.term_code import FALLBACK_TERM_CODE, derive_term_code

__all__ = [
    "FALLBACK_TERM_CODE",
    "derive_term_code",
    "enrich_question",
]
