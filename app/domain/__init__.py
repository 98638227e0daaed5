"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import SearchResultType
from app.domain.exceptions import (
    GlobalSearchException,
    SearchFailedException,
    SqlNotConfiguredException,
)

__all__ = [
    # Enums
    "SearchResultType",
    # Exceptions
    "GlobalSearchException",
    "SearchFailedException",
    "SqlNotConfiguredException",
]
