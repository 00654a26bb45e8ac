"""
Message ORM model.

One role-tagged utterance within a session. Append-only.

Dependencies: sqlalchemy, sales_agent.boundary.db.base
System role: Conversation transcript persistence
"""

import enum
from uuid import UUID as PyUUID

from sqlalchemy import Enum, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sales_agent.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class MessageRole(str, enum.Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning session (cascade delete)
        role: USER or ASSISTANT
        content: Message text
        created_at: Creation timestamp (UTC); defines transcript order
    """

    __tablename__ = "messages"

    session_id: Mapped[PyUUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[MessageRole] = mapped_column(
        Enum(MessageRole, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    session = relationship("SessionModel", back_populates="messages")
    guideline_usages = relationship(
        "GuidelineUsageModel",
        back_populates="message",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
