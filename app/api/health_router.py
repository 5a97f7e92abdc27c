"""Liveness endpoints."""

from fastapi import APIRouter

from app.schemas.response_schema import HealthResponse, PingResponse

router = APIRouter(tags=["health"])


@router.get("/_status", response_model=HealthResponse)
async def status() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@router.get("/ping", response_model=PingResponse)
@router.get("/api/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Ping endpoint."""
    return PingResponse()
