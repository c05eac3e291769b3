"""Custom exceptions and exception handlers.

This module defines the application's exception hierarchy and registers
global exception handlers for FastAPI. Every error leaves the service as
``{"error": <message>, "detail": <optional diagnostic>}``.
"""

from enum import StrEnum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from image_bookmarks.schemas.base import ErrorBody
from image_bookmarks.utils.logging import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/"


class ErrorCode(StrEnum):
    """Machine-readable error codes, used in logs."""

    # Resource errors
    BOOKMARK_NOT_FOUND = "BOOKMARK_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_IDENTITY = "MISSING_IDENTITY"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message, sent as ``error``.
        status_code: HTTP status code.
        detail: Optional diagnostic text, sent as ``detail``.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str = "Server error",
        *,
        code: ErrorCode | None = None,
        detail: str | None = None,
    ) -> None:
        self.message = message
        if code is not None:
            self.code = code
        self.detail = detail
        super().__init__(message)

    def to_response(self) -> dict[str, Any]:
        """Convert exception to error response format."""
        return ErrorBody(error=self.message, detail=self.detail).model_dump(exclude_none=True)


class NotFoundError(AppException):
    """Resource not found error."""

    status_code = status.HTTP_404_NOT_FOUND
    code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(
        self,
        resource: str | None = None,
        *,
        code: ErrorCode | None = None,
    ) -> None:
        message = f"{resource} not found" if resource else "Not Found"
        super().__init__(message, code=code)


class ValidationError(AppException):
    """Validation error for missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = ErrorCode.VALIDATION_ERROR


class MissingIdentityError(AppException):
    """No user id could be resolved for an API request."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = ErrorCode.MISSING_IDENTITY

    def __init__(self, message: str = "Unable to determine user id.") -> None:
        super().__init__(message)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application-specific exceptions."""
    logger.info(
        "Request rejected",
        extra={"code": str(exc.code), "status_code": exc.status_code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(),
    )


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors (malformed JSON, wrong field types)."""
    messages = []
    for error in exc.errors():
        # Extract field name from location tuple
        loc = error.get("loc", ())
        field = ".".join(str(x) for x in loc[1:]) if len(loc) > 1 else str(loc[0]) if loc else ""
        messages.append(f"{field}: {error.get('msg', 'Invalid value')}")

    validation_error = ValidationError(
        message="Invalid request body",
        detail="; ".join(messages) or None,
    )

    return JSONResponse(
        status_code=validation_error.status_code,
        content=validation_error.to_response(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Handle routing errors.

    Unmatched paths and unsupported methods are both reported as 404: JSON
    under ``/api/``, plain text elsewhere.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        if request.url.path.startswith(API_PREFIX):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=NotFoundError().to_response(),
            )
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorBody(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=exc.headers,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"path": request.url.path, "exception_type": type(exc).__name__},
    )

    error = AppException(
        message="Server error",
        code=ErrorCode.INTERNAL_ERROR,
        detail=str(exc),
    )

    return JSONResponse(
        status_code=error.status_code,
        content=error.to_response(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
