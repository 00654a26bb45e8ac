"""
Sales agent request/response schemas.

Defines the public contract of the turn pipeline. Responses are
serialized with camelCase keys for the HTTP layer.

Dependencies: pydantic
System role: Sales agent schema definitions
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AgentRequest(BaseModel):
    """Inbound user turn."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(
        default=None,
        alias="sessionId",
        description="Existing session ID; a new session is created when absent or unknown",
    )
    message: str = Field(description="User message")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v


class AgentResponse(BaseModel):
    """Result of one turn."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str = Field(description="Session the turn belongs to")
    reply: str = Field(description="Assistant reply")
    hard_guidelines_used: list[str] = Field(
        default_factory=list,
        description="IDs of hard guidelines applied, in selection order",
    )
    soft_guidelines_used: list[str] = Field(
        default_factory=list,
        description="IDs of soft guidelines applied, in selection order",
    )
