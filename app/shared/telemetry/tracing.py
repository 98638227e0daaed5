"""Span helper for search work (one span per adapter run)."""

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

_tracer = trace.get_tracer("app.search")


class TracedOperation:
    """Async context manager that opens a current span for the block.

    With no tracer provider configured the span is a non-recording no-op.
    Exceptions leaving the block mark the span as ERROR and are re-raised.
    """

    def __init__(
        self, operation_name: str, attributes: dict[str, str | int] | None = None
    ) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self._cm = None
        self.span: trace.Span | None = None

    async def __aenter__(self) -> "TracedOperation":
        self._cm = _tracer.start_as_current_span(
            self.operation_name,
            attributes=self.attributes,
            record_exception=False,
            set_status_on_exception=False,
        )
        self.span = self._cm.__enter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self.span is None or self._cm is None:
            return
        if exc_val is not None:
            self.span.set_status(Status(StatusCode.ERROR, str(exc_val)))
            self.span.record_exception(exc_val)
        else:
            self.span.set_status(Status(StatusCode.OK))
        self._cm.__exit__(exc_type, exc_val, exc_tb)
