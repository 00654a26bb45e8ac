"""
Guideline API schemas.

Dependencies: pydantic
System role: Guideline API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class GuidelineResponse(BaseModel):
    """Guideline as exposed over HTTP."""

    id: uuid.UUID
    title: str
    content: str
    strength: Literal["hard", "soft"]
    priority: int
    triggers: list[str] = Field(default_factory=list)
    active: bool
    single_use: bool
    created_at: datetime
    updated_at: datetime


class GuidelineSearchQuery(BaseModel):
    """Filters echoed back by the search endpoint."""

    strength: Literal["hard", "soft"] | None = None
    priority_min: int | None = None
    priority_max: int | None = None
    triggers: list[str] | None = None
    active: bool | None = None
    single_use: bool | None = None
    limit: int | None = Field(default=None, gt=0)
