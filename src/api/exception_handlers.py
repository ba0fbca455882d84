"""Translate exceptions into the API's error envelope.

Every error response has the same shape::

    {"error_code": "...", "message": "...", "details": ...}
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()


def _error_response(
    status_code: int, error_code: str, message: Any, details: Any = None
) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
        # 5xx application errors are ours; anything below is the caller's.
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "app_exception",
            error_code=exc.error_code.value,
            status_code=exc.status_code,
            message=exc.message,
            method=request.method,
            path=request.url.path,
        )
        return _error_response(
            exc.status_code, exc.error_code.value, exc.message, exc.details
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> ORJSONResponse:
        return _error_response(exc.status_code, "HTTP_ERROR", exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        details = _field_errors(exc)
        logger.info("request_validation_failed", path=request.url.path, errors=details)
        return _error_response(
            422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", details
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )
        message = "An unexpected error occurred" if settings.is_production else str(exc)
        return _error_response(
            500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
        )
