"""HTTP error mapping.

Every non-2xx body is {"error": "..."}; request validation failures add a
"details" list. register_exception_handlers(app) wires the handlers.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import GlobalSearchException

logger = logging.getLogger(__name__)

# Unlisted codes are treated as client errors.
_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "SEARCH_FAILED": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def _search_exception_handler(
    request: Request, exc: GlobalSearchException
) -> JSONResponse:
    status_code = _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status_code >= 500:
        logger.error(
            "%s %s failed (%s): %s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.message,
        )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors reduced to loc/msg/type (ctx may hold exception objects)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for bad query parameters (unknown type, non-integer limit)."""
    return JSONResponse(
        status_code=422,
        content={"error": "Request validation failed", "details": jsonable_errors(exc)},
    )


def _starlette_http_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when DEBUG is on."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GlobalSearchException, _search_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _starlette_http_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
