"""Common API response schemas."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response with a reason, an error code and optional diagnostics."""

    error: str
    code: str
    details: Any = None


class HealthResponse(BaseModel):
    """Liveness payload."""

    ok: bool = True
    status: str = "healthy"


class PingResponse(BaseModel):
    """Ping payload."""

    message: str = "pong"


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Session not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}
