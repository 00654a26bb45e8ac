"""
Message and guideline usage schemas.

Dependencies: pydantic
System role: Transcript and usage ledger API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from sales_agent.models.guideline import GuidelineResponse


class CreateMessageRequest(BaseModel):
    """Request schema for appending a message to a session."""

    role: Literal["user", "assistant"]
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be empty")
        return v


class MessageBrief(BaseModel):
    """Message without its usage records."""

    id: uuid.UUID
    session_id: uuid.UUID
    role: Literal["user", "assistant"]
    content: str
    created_at: datetime


class GuidelineUsageResponse(BaseModel):
    """One usage ledger entry."""

    id: uuid.UUID
    session_id: uuid.UUID
    message_id: uuid.UUID
    guideline_id: uuid.UUID
    used_at: datetime
    guideline: GuidelineResponse | None = None
    message: MessageBrief | None = None


class MessageResponse(MessageBrief):
    """Message with the guidelines applied to it."""

    guideline_usages: list[GuidelineUsageResponse] = Field(default_factory=list)
