"""Share repository for session and message database operations."""

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.shared_message import SharedMessage
from app.models.shared_session import SharedSession


@dataclass(frozen=True)
class MessageRow:
    """Immutable result object for message queries. ``content`` is still serialized."""

    created: int
    role: str
    content: str


class ShareRepository:
    """Encapsulates shared session and message database queries.

    Writes only flush; committing (or rolling back) is left to the caller so a
    session and its messages land in one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_session(
        self,
        share_token: str,
        created: int,
        base_url: str,
        working_dir: str,
        description: str,
        message_count: int,
        total_tokens: int | None = None,
    ) -> SharedSession:
        """Insert a shared session row.

        Raises ``IntegrityError`` if ``share_token`` already exists.
        """
        shared = SharedSession(
            share_token=share_token,
            created=created,
            base_url=base_url,
            working_dir=working_dir,
            description=description,
            message_count=message_count,
            total_tokens=total_tokens,
        )
        self._session.add(shared)
        await self._session.flush()
        return shared

    async def create_message(
        self,
        session_token: str,
        created: int,
        role: str,
        content: str,
    ) -> SharedMessage:
        """Insert a message row.

        Raises ``IntegrityError`` if ``session_token`` has no session.
        """
        message = SharedMessage(
            session_token=session_token,
            created=created,
            role=role,
            content=content,
        )
        self._session.add(message)
        await self._session.flush()
        return message

    async def find_session_by_token(self, share_token: str) -> SharedSession | None:
        """Find a shared session by its token."""
        result = await self._session.execute(
            select(SharedSession).where(SharedSession.share_token == share_token)
        )
        return result.scalar_one_or_none()

    async def find_messages_by_token(self, session_token: str) -> list[MessageRow]:
        """Retrieve all messages for a session in chronological order."""
        result = await self._session.execute(
            select(SharedMessage.created, SharedMessage.role, SharedMessage.content)
            .where(SharedMessage.session_token == session_token)
            .order_by(SharedMessage.created.asc(), SharedMessage.id.asc())
        )
        return [
            MessageRow(created=row.created, role=row.role, content=row.content)
            for row in result
        ]

    async def list_sessions(self) -> list[SharedSession]:
        """Return every shared session, newest first."""
        result = await self._session.execute(
            select(SharedSession).order_by(SharedSession.created.desc())
        )
        return list(result.scalars().all())
