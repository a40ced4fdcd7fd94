"""Error Handlers — global exception handlers for the API.

Invariants:
    - KnownDataAccessError → 400 {statusCode, message} (first + last message line)
    - RequestValidationError → 400 with one message per rejected field
    - Exception (catch-all) → 500, never leaks internal details
    - Every body carries statusCode; none carries a traceback

Design Decisions:
    - Three-layer handler: known data errors, validation (Pydantic), catch-all (Exception)
    - Known-error shaping shared with api/responses.py so raised and returned
      errors produce byte-identical bodies
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from starter_api.api.responses import known_error_response
from starter_api.core.errors import KnownDataAccessError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_known_data_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_known_data_error_handler(app: FastAPI) -> None:
    """Register the database-error normalizer."""

    @app.exception_handler(KnownDataAccessError)
    async def known_data_error_handler(
        request: Request, exc: KnownDataAccessError,
    ):
        return known_error_response(exc.error, request)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "statusCode": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "Internal server error",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "statusCode": status.HTTP_400_BAD_REQUEST,
        "message": [_format_validation_error(e) for e in exc.errors()],
        "error": "Bad Request",
    }


def _format_validation_error(error: dict) -> str:
    # loc starts with the request part ("body", "query", ...)
    field = ".".join(str(loc) for loc in error["loc"][1:])
    return f"{field}: {error['msg']}" if field else error["msg"]
