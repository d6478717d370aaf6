# This file defines the error payload shared by every endpoint and the handlers that produce it.
# It exists so domain failures, request validation failures, and storage conflicts all answer in one shape.
# The handlers translate failures into safe client messages with a request trace field.
# Centralized error handling prevents stack traces from leaking in production responses.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from credit_system.domain.exceptions import BusinessException

LOGGER = logging.getLogger("api")

BAD_REQUEST_TITLE = "Bad Request ! Consult the documentation"
CONFLICT_TITLE = "Conflict ! Consult the documentation"


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *,
    request: Request,
    title: str,
    status: int,
    exception: str,
    details: list[str],
) -> dict[str, Any]:
    return {
        "title": title,
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "status": status,
        "exception": exception,
        "details": details,
        "request_id": _request_id(request),
    }


def _field_name(location: tuple[Any, ...] | list[Any]) -> str:
    parts = [str(part) for part in location if part not in {"body", "query", "path"}]
    return ".".join(parts) or "request"


def validation_details(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors into `field: message` strings."""

    return [f"{_field_name(error.get('loc', ()))}: {error.get('msg', 'invalid value')}" for error in exc.errors()]


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(BusinessException)
    async def business_exception_handler(request: Request, exc: BusinessException) -> JSONResponse:
        LOGGER.info("business rule violated path=%s message=%s", request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                title=BAD_REQUEST_TITLE,
                status=400,
                exception=type(exc).__name__,
                details=[exc.message],
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                title=BAD_REQUEST_TITLE,
                status=400,
                exception=type(exc).__name__,
                details=validation_details(exc),
            ),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        message = str(exc.orig) if exc.orig is not None else "Constraint violation."
        LOGGER.warning("storage conflict path=%s message=%s", request.url.path, message)
        return JSONResponse(
            status_code=409,
            content=_error_body(
                request=request,
                title=CONFLICT_TITLE,
                status=409,
                exception=type(exc).__name__,
                details=[message],
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                title="HTTP error",
                status=exc.status_code,
                exception=type(exc).__name__,
                details=[str(exc.detail)],
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception("unhandled error path=%s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                title="Internal Server Error",
                status=500,
                exception="InternalServerError",
                details=["The server encountered an unexpected error."],
            ),
        )
