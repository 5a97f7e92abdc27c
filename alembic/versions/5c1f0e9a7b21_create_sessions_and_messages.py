"""create sessions and messages tables

Revision ID: 5c1f0e9a7b21
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1f0e9a7b21"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create sessions and messages tables."""
    op.create_table(
        "sessions",
        sa.Column("share_token", sa.String(21), nullable=False),
        sa.Column("created", sa.BigInteger(), nullable=False),
        sa.Column("base_url", sa.Text(), nullable=False),
        sa.Column("working_dir", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("message_count", sa.Integer(), nullable=False),
        sa.Column("total_tokens", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("share_token"),
    )
    op.create_index(
        op.f("ix_sessions_created"),
        "sessions",
        ["created"],
        unique=False,
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_token", sa.String(21), nullable=False),
        sa.Column("created", sa.BigInteger(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["session_token"], ["sessions.share_token"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_messages_session_token"),
        "messages",
        ["session_token"],
        unique=False,
    )


def downgrade() -> None:
    """Drop messages and sessions tables."""
    op.drop_index(op.f("ix_messages_session_token"), table_name="messages")
    op.drop_table("messages")
    op.drop_index(op.f("ix_sessions_created"), table_name="sessions")
    op.drop_table("sessions")
