"""Domain exceptions for the global search service.

Only failures that abort a whole search are raised; a single collection
failing is reported through AdapterOutcome instead. The HTTP layer turns
these into {"error": message} bodies (app.core.exception_handlers).
"""

from typing import Any


class GlobalSearchException(Exception):
    """Root of the service's exception hierarchy.

    Attributes:
        message: Text sent to the client as the "error" field.
        error_code: Stable code the exception handlers map to a status.
        details: Extra context for logs; never serialized to clients.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details) if details else {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Client-facing error body."""
        return {"error": self.message}


class SqlNotConfiguredException(GlobalSearchException):
    """No DATABASE_URL, so no store session can be opened."""

    def __init__(self) -> None:
        super().__init__(
            "The search store is not configured (set DATABASE_URL).",
            error_code="SERVICE_UNAVAILABLE",
        )


class SearchFailedException(GlobalSearchException):
    """The store is missing or unreachable; the search cannot run at all.

    Args:
        cause: Text of the underlying error, appended to the message.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(
            f"Search failed: {cause}",
            error_code="SEARCH_FAILED",
            details={"cause": cause},
        )
