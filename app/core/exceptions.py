"""Application exception classes and handlers."""

from typing import Any

import structlog
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Any = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(message)


# --- Bad Request (400) ---


class InvalidMessagesError(AppException):
    """The ``messages`` field is missing or is not an array of objects."""

    def __init__(self, details: Any = None) -> None:
        super().__init__(
            message="Invalid messages array",
            code="INVALID_MESSAGES",
            status_code=400,
            details=details,
        )


class InvalidRequestError(AppException):
    """Request body could not be parsed or validated."""

    def __init__(self, details: Any = None) -> None:
        super().__init__(
            message="Invalid request body",
            code="INVALID_REQUEST",
            status_code=400,
            details=details,
        )


# --- Not Found (404) ---


class SessionNotFoundError(AppException):
    """No shared session exists for the given token."""

    def __init__(self) -> None:
        super().__init__(
            message="Session not found",
            code="SESSION_NOT_FOUND",
            status_code=404,
        )


# --- Server Error (500) ---


class StorageError(AppException):
    """Persistence or (de)serialization failure."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=500,
            details=details,
        )


# --- Exception Handlers ---


def _error_body(exc: AppException) -> dict[str, Any]:
    body: dict[str, Any] = {"error": exc.message, "code": exc.code}
    if exc.details is not None:
        body["details"] = jsonable_encoder(exc.details)
    return body


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as 400 instead of FastAPI's 422."""
    errors = [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in exc.errors()
    ]
    if any(_is_messages_error(error) for error in errors):
        app_exc: AppException = InvalidMessagesError(details=errors)
    else:
        app_exc = InvalidRequestError(details=errors)
    return await app_exception_handler(request, app_exc)


def _is_messages_error(error: dict[str, Any]) -> bool:
    loc = tuple(error["loc"])
    if loc == ("body",):
        # no body at all, so no messages either
        return error["type"] == "missing"
    # the array itself or one of its items, not a field inside an item
    return loc[:2] == ("body", "messages") and len(loc) <= 3


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures as a JSON 500 instead of plain text."""
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "code": "INTERNAL_ERROR",
            "details": str(exc),
        },
    )
