"""Application lifespan.

Startup: logging, navigation catalog (app.state.navigation_catalog), and
tracing when TELEMETRY_ENABLED. Shutdown: flush spans, dispose the store
engine so pooled connections close cleanly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.application.use_cases.search import build_default_catalog
from app.core.config import Settings, get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


def _start_tracing(app: FastAPI, settings: Settings) -> None:
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        environment=settings.telemetry_environment,
    )
    if telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    ) is None:
        return
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)
    # The engine is normally created lazily; build it now so its queries are traced.
    engine = database.get_engine()
    if engine is not None:
        telemetry.instrument_sqlalchemy(engine)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()

    setup_logging()
    app.state.navigation_catalog = build_default_catalog()
    logger.info(
        "Starting %s %s (%d navigation entries, store %s)",
        settings.app_name,
        settings.app_version,
        len(app.state.navigation_catalog),
        "configured" if settings.database_url else "not configured",
    )
    if settings.telemetry_enabled:
        _start_tracing(app, settings)

    yield

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
    await database.dispose_engine()
    logger.info("Shutdown complete")
