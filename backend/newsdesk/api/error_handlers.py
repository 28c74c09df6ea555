"""Error Handlers — global exception handlers for the Newsdesk API.

Invariants:
    - Every error response body is {"message": str}
    - NewsdeskError → status and message from its ErrorKind
    - RequestValidationError → MISSING_REQUIRED_DATA if any field is missing,
      INVALID_INPUT otherwise
    - Framework 404/405 (no route matched path or method) → "Path not found"
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsdesk.core.errors import (
    ErrorKind,
    NewsdeskError,
    PathNotFoundError,
    RequestValidationFailure,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_newsdesk_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: NewsdeskError) -> JSONResponse:
    """Single dispatch from error kind to HTTP response."""
    logger.warning(
        f"{exc.category.value} error on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def classify_validation_error(exc: RequestValidationError) -> RequestValidationFailure:
    missing = any(e.get("type") == "missing" for e in exc.errors())
    return RequestValidationFailure(missing=missing)


def _register_newsdesk_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NewsdeskError)
    async def newsdesk_error_handler(request: Request, exc: NewsdeskError):
        return render_error(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.debug(f"Validation error on {request.url.path}: {exc.errors()}")
        return render_error(request, classify_validation_error(exc))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return render_error(
                request, PathNotFoundError(request.method, request.url.path),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_code": ErrorKind.INTERNAL.value,
                "path": request.url.path,
                "method": request.method,
            },
        )
        internal = NewsdeskError(ErrorKind.INTERNAL)
        return JSONResponse(
            status_code=internal.http_status, content=internal.to_response(),
        )
