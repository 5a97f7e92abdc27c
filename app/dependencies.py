"""Global dependencies for the application."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_async_session
from app.repositories.share_repo import ShareRepository
from app.services.share_service import ShareService


def get_share_repository(
    session: AsyncSession = Depends(get_async_session),
) -> ShareRepository:
    """Get ShareRepository bound to the current session."""
    return ShareRepository(session)


def get_share_service(
    share_repo: ShareRepository = Depends(get_share_repository),
    session: AsyncSession = Depends(get_async_session),
) -> ShareService:
    """Get ShareService with its repository and transaction handle."""
    return ShareService(share_repo=share_repo, session=session)
