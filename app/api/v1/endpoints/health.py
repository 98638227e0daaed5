"""Health check endpoints, used for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_store_connection
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Store not configured or unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 if the search store answers a probe query; 503 otherwise."""
    store = get_store_connection()
    if store is None:
        message = "Search store is not configured (DATABASE_URL)"
    else:
        try:
            await store.ping()
            return ReadinessResponse()
        except Exception as exc:
            logger.warning("Readiness probe failed: %s", exc)
            message = f"Search store unreachable: {exc}"
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(status="not_ready", message=message).model_dump(),
    )
