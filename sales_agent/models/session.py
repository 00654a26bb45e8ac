"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    id: uuid.UUID
    summary: str | None
    created_at: datetime
    updated_at: datetime


class SessionListItem(SessionResponse):
    """Session with transcript and usage counts."""

    message_count: int = 0
    guideline_usage_count: int = 0


class SessionsByDate(BaseModel):
    date: str
    count: int


class SessionStatistics(BaseModel):
    """Aggregate session statistics."""

    total_sessions: int
    total_messages: int
    total_guideline_usages: int
    sessions_by_date: list[SessionsByDate] = Field(default_factory=list)


class BulkDeleteRequest(BaseModel):
    """Request schema for deleting several sessions."""

    ids: list[uuid.UUID] = Field(min_length=1, description="Session IDs to delete")


class BulkDeleteResult(BaseModel):
    count: int = Field(description="Number of sessions deleted")
