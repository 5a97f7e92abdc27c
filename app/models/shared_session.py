"""Shared session database model."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class SharedSession(Base):
    """Metadata of one shared conversation transcript."""

    __tablename__ = "sessions"

    share_token: Mapped[str] = mapped_column(String(21), primary_key=True)
    created: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    base_url: Mapped[str] = mapped_column(Text, nullable=False)
    working_dir: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    message_count: Mapped[int] = mapped_column(Integer, nullable=False)
    total_tokens: Mapped[int | None] = mapped_column(Integer, nullable=True)
