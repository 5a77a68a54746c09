"""Exception handlers — map the error taxonomy to uniform JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from review_analyzer.domain.exceptions import (
    AnalysisError,
    ConfigurationError,
    InvalidInputError,
    UpstreamFailureError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[AnalysisError], int] = {
    InvalidInputError: 400,
    ConfigurationError: 500,
    UpstreamFailureError: 500,
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    status_code = STATUS_BY_ERROR.get(type(exc), 500)
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(status_code, exc.message)


# Error types FastAPI reports when the body cannot be decoded as JSON
JSON_DECODE_ERROR_TYPES = {"json_invalid", "value_error.jsondecode"}


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Undecodable body is a generic failure; any other shape is a missing review."""
    errors = exc.errors()
    if any(e.get("type") in JSON_DECODE_ERROR_TYPES for e in errors):
        logger.warning("Undecodable request body on %s", request.url.path)
        return _error_response(500, AnalysisError.message)
    logger.warning("Malformed request body on %s: %s", request.url.path, errors)
    return _error_response(400, InvalidInputError.message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s", request.url.path)
    return _error_response(500, AnalysisError.message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnalysisError, analysis_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
