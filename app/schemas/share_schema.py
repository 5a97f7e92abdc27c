"""Session sharing API schemas."""

import json
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

# BIGINT for timestamps, INTEGER for token counts
Timestamp = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]
TokenCount = Annotated[int, Field(ge=0, le=2**31 - 1)]


class SharedMessageIn(BaseModel):
    """One submitted message. Absent fields are filled in by the service."""

    created: Timestamp | None = None
    role: str | None = None
    content: JsonValue = Field(default_factory=list)

    @field_validator("content")
    @classmethod
    def content_must_be_strict_json(cls, value: JsonValue) -> JsonValue:
        """Reject NaN and Infinity, which have no JSON text form."""
        json.dumps(value, allow_nan=False)
        return value


class ShareRequest(BaseModel):
    """Request to share a session transcript."""

    messages: list[SharedMessageIn]
    working_dir: str | None = None
    description: str | None = None
    base_url: str | None = None
    total_tokens: TokenCount | None = None


class ShareResponse(BaseModel):
    """Token issued for a shared session."""

    model_config = ConfigDict(frozen=True)

    share_token: str


class SessionResponse(BaseModel):
    """Shared session metadata, without messages."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    share_token: str
    created: int
    base_url: str
    working_dir: str
    description: str
    message_count: int
    total_tokens: int | None = None


class MessageResponse(BaseModel):
    """Single message with its content deserialized."""

    model_config = ConfigDict(frozen=True)

    created: int
    role: str
    content: JsonValue = None


class SharedSessionResponse(SessionResponse):
    """Shared session metadata together with its ordered messages."""

    messages: list[MessageResponse]
