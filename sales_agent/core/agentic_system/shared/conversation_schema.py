"""
Shared conversation schemas.

Values passed between the context gatherer, guideline selector,
prompt builder and summarizer.

Dependencies: pydantic
System role: Schemas for reusable agent components
"""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """A transcript entry reduced to role and content."""

    role: Literal["user", "assistant"]
    content: str


class ConversationContext(BaseModel):
    """Conversation state read at the start of a turn."""

    session_id: UUID
    message: str
    session_summary: str | None = None
    recent_messages: list[ChatTurn] = Field(default_factory=list)


class GuidelineSelection(BaseModel):
    """Guidelines chosen for one turn, split by strength (GuidelineModel rows)."""

    hard: list = Field(default_factory=list)
    soft: list = Field(default_factory=list)


class GuidelineRef(BaseModel):
    """Guideline as rendered into a system prompt."""

    id: str = Field(description="Guideline identifier")
    content: str = Field(description="Instruction text")


class PromptContext(BaseModel):
    """Inputs of the system prompt builder."""

    stage: str
    summary: str | None = None
    hard: list[GuidelineRef] = Field(default_factory=list)
    soft: list[GuidelineRef] = Field(default_factory=list)


class SummaryResult(BaseModel):
    """Summarizer output tagged with the path that produced it."""

    summary: str
    source: Literal["model", "fallback", "empty"]
