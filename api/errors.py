"""
Module 09D - API Error Handling

Standardized error handling for the API.

Core failures map to client errors; a well-formed signature that does not
verify is never an error (it is a 200 with valid=false).

    INVALID_INPUT / INVALID_KEY  -> 400
    ENTROPY_FAILURE              -> 503
    anything unexpected          -> 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse, ErrorDetail
from core.schemas.errors import ErrorCodes, SignetException


logger = logging.getLogger(__name__)


STATUS_BY_CODE: dict[str, int] = {
    ErrorCodes.INVALID_INPUT: 400,
    ErrorCodes.CANONICALIZATION_ERROR: 400,
    ErrorCodes.INVALID_KEY: 400,
    ErrorCodes.ENTROPY_FAILURE: 503,
    ErrorCodes.CONFIGURATION_ERROR: 500,
}


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                details=self.details,
            ),
        )

    @classmethod
    def from_exception(cls, exc: SignetException) -> "APIError":
        """Wrap a core exception with its HTTP status."""
        return cls(
            code=exc.code,
            message=exc.message,
            status_code=STATUS_BY_CODE.get(exc.code, 500),
            details=exc.details,
        )


class InvalidRequestError(APIError):
    """Request body missing fields or of the wrong shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code=ErrorCodes.INVALID_INPUT,
            message=message,
            status_code=400,
            details=details,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def signet_error_handler(request: Request, exc: SignetException) -> JSONResponse:
    """Handle core exceptions raised by the signing operations."""
    error = APIError.from_exception(exc)
    if exc.fatal:
        logger.critical("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected [%s]: %s", request.method, request.url.path, exc.code, exc.message)
    return await api_error_handler(request, error)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request-schema failures (missing or mistyped fields) as INVALID_INPUT."""
    fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
    error = InvalidRequestError(
        "Request body is missing required fields or has fields of the wrong type",
        details={"fields": fields},
    )
    logger.info("%s %s rejected [INVALID_INPUT]: %s", request.method, request.url.path, fields)
    return await api_error_handler(request, error)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
                details={"type": type(exc).__name__},
            ),
        ).model_dump(),
    )
