"""Session sharing API router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_share_service
from app.schemas.response_schema import ERROR_RESPONSES
from app.schemas.share_schema import (
    SessionResponse,
    ShareRequest,
    ShareResponse,
    SharedSessionResponse,
)
from app.services.share_service import ShareService

router = APIRouter(
    prefix="/api/sessions",
    tags=["sessions"],
    responses=ERROR_RESPONSES,
)

ShareServiceDep = Annotated[ShareService, Depends(get_share_service)]


@router.post("/share", response_model=ShareResponse)
async def share_session(
    request: ShareRequest,
    service: ShareServiceDep,
) -> ShareResponse:
    """Store a session transcript and return its share token."""
    return await service.share(request)


@router.get("/share/{share_token}", response_model=SharedSessionResponse)
async def get_shared_session(
    share_token: str,
    service: ShareServiceDep,
) -> SharedSessionResponse:
    """Fetch a shared session and its messages by token."""
    return await service.get_shared_session(share_token)


@router.get("", response_model=list[SessionResponse])
async def list_sessions(service: ShareServiceDep) -> list[SessionResponse]:
    """List every shared session, newest first, without messages."""
    return await service.list_sessions()
