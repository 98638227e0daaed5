"""Logging setup, OpenTelemetry tracer provider, and the search span helper."""

from app.shared.telemetry.logging import RequestIdLogFilter, setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from app.shared.telemetry.tracing import TracedOperation

__all__ = [
    "RequestIdLogFilter",
    "TelemetryConfig",
    "TracedOperation",
    "get_telemetry",
    "set_telemetry",
    "setup_logging",
]
