"""Business logic for sharing and retrieving session transcripts."""

import json
import secrets
import time

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import SessionNotFoundError, StorageError
from app.repositories.share_repo import ShareRepository
from app.schemas.share_schema import (
    MessageResponse,
    SessionResponse,
    SharedMessageIn,
    ShareRequest,
    ShareResponse,
    SharedSessionResponse,
)

logger = structlog.get_logger()

SHARE_TOKEN_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
SHARE_TOKEN_LENGTH = 21

PLACEHOLDER = "unknown"
DEFAULT_ROLE = "unknown"


def generate_share_token() -> str:
    """Return a uniformly random 21-character alphanumeric token."""
    return "".join(
        secrets.choice(SHARE_TOKEN_ALPHABET) for _ in range(SHARE_TOKEN_LENGTH)
    )


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def serialize_content(content: object) -> str:
    """Serialize message content for storage."""
    return json.dumps(content, ensure_ascii=False, allow_nan=False)


def deserialize_content(raw: str) -> object:
    """Restore message content from its stored form."""
    return json.loads(raw)


class ShareService:
    """Orchestrates session sharing inside a single transaction."""

    def __init__(self, share_repo: ShareRepository, session: AsyncSession) -> None:
        self._share_repo = share_repo
        self._session = session

    async def share(self, request: ShareRequest) -> ShareResponse:
        """Persist a session and all of its messages atomically."""
        share_token = generate_share_token()
        created = now_ms()

        try:
            await self._share_repo.create_session(
                share_token=share_token,
                created=created,
                base_url=request.base_url or PLACEHOLDER,
                working_dir=request.working_dir or PLACEHOLDER,
                description=request.description or PLACEHOLDER,
                message_count=len(request.messages),
                total_tokens=request.total_tokens,
            )
            for message in request.messages:
                await self._create_message(share_token, message, created)
            await self._session.commit()
        except (SQLAlchemyError, TypeError, ValueError, OverflowError) as exc:
            await self._session.rollback()
            logger.exception("Error sharing session", share_token=share_token)
            raise StorageError("Failed to share session", details=str(exc)) from exc

        logger.info(
            "Session shared",
            share_token=share_token,
            message_count=len(request.messages),
        )
        return ShareResponse(share_token=share_token)

    async def _create_message(
        self, share_token: str, message: SharedMessageIn, fallback_created: int
    ) -> None:
        created = message.created if message.created is not None else fallback_created
        await self._share_repo.create_message(
            session_token=share_token,
            created=created,
            role=message.role or DEFAULT_ROLE,
            content=serialize_content(message.content),
        )

    async def get_shared_session(self, share_token: str) -> SharedSessionResponse:
        """Return a shared session with its messages in chronological order."""
        try:
            shared = await self._share_repo.find_session_by_token(share_token)
            if shared is None:
                logger.warning("Shared session not found", share_token=share_token)
                raise SessionNotFoundError()
            rows = await self._share_repo.find_messages_by_token(share_token)
            messages = [
                MessageResponse(
                    created=row.created,
                    role=row.role,
                    content=deserialize_content(row.content),
                )
                for row in rows
            ]
        except (SQLAlchemyError, ValueError) as exc:
            logger.exception("Error getting session", share_token=share_token)
            raise StorageError("Failed to get session", details=str(exc)) from exc

        return SharedSessionResponse(
            **SessionResponse.model_validate(shared).model_dump(),
            messages=messages,
        )

    async def list_sessions(self) -> list[SessionResponse]:
        """Return every shared session, newest first, without messages."""
        try:
            rows = await self._share_repo.list_sessions()
        except SQLAlchemyError as exc:
            logger.exception("Error listing sessions")
            raise StorageError("Failed to list sessions", details=str(exc)) from exc
        return [SessionResponse.model_validate(row) for row in rows]
