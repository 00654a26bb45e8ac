"""
Guideline usage ORM model.

Join record stating that a guideline fired on an assistant message
within a session. Drives the "not yet used in this session" rule.

Dependencies: sqlalchemy, sales_agent.boundary.db.base
System role: Usage ledger persistence
"""

from datetime import datetime
from uuid import UUID as PyUUID

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sales_agent.boundary.db.base import Base, UUIDMixin, utc_now


class GuidelineUsageModel(Base, UUIDMixin):
    """
    Guideline usage ORM model.

    Rows are written right after the assistant message they annotate,
    so used_at is never earlier than the message's created_at.
    No uniqueness on (session_id, guideline_id): concurrent turns on one
    session may both record the same guideline.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning session (cascade delete)
        message_id: Annotated assistant message (cascade delete)
        guideline_id: Guideline that fired (cascade delete)
        used_at: Recording timestamp (UTC)
    """

    __tablename__ = "guideline_usages"

    session_id: Mapped[PyUUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    message_id: Mapped[PyUUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("messages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    guideline_id: Mapped[PyUUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("guidelines.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    used_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    # Relationships
    session = relationship("SessionModel", back_populates="guideline_usages")
    message = relationship("MessageModel", back_populates="guideline_usages")
    guideline = relationship("GuidelineModel", back_populates="usages")
