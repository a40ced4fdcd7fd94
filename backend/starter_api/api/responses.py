"""Response Helpers — the boundary where DataResult variants become HTTP responses.

Invariants:
    - Ok → requested status with the JSON-encoded value
    - KnownDataError → 400 {statusCode, message}, nothing else leaks
    - Every known error is logged once, with its structured fields, at warning level
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from starter_api.core.data_result import DataResult, Ok
from starter_api.core.errors import KnownDataError
from starter_api.core.normalize_error import KNOWN_ERROR_STATUS, build_error_body

logger = logging.getLogger(__name__)


def known_error_response(
    error: KnownDataError, request: Request | None = None,
) -> JSONResponse:
    """Normalize a known data-access error into the 400 response."""
    logger.warning(
        f"Known data-access error: {error.kind.value}",
        extra={
            "error_code": error.code,
            "path": request.url.path if request else None,
            "method": request.method if request else None,
            "model": error.model,
            "operation": error.operation,
        },
    )
    return JSONResponse(
        status_code=KNOWN_ERROR_STATUS, content=build_error_body(error),
    )


def respond(
    result: DataResult,
    status_code: int = status.HTTP_200_OK,
    response_model: type[BaseModel] | None = None,
    request: Request | None = None,
) -> JSONResponse:
    """Turn a repository result into a JSON response."""
    match result:
        case Ok(value=value):
            payload = (
                response_model.model_validate(value) if response_model else value
            )
            return JSONResponse(
                status_code=status_code, content=jsonable_encoder(payload),
            )
        case KnownDataError():
            return known_error_response(result, request)
        case _:
            raise TypeError(f"Not a DataResult: {type(result).__name__}")
