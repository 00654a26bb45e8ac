"""
Session ORM model.

Represents one conversation thread with its rolling summary.

Dependencies: sqlalchemy, sales_agent.boundary.db.base
System role: Session persistence for conversation state
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sales_agent.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model owning messages and guideline usage records.

    Deleting a session removes its messages and usage rows through
    ON DELETE CASCADE foreign keys; passive_deletes leaves the work to
    the database so no collections are loaded on delete.

    Attributes:
        id: UUID primary key (auto-generated)
        summary: Rolling synopsis, rewritten after every turn (nullable)
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        messages: One-to-many with MessageModel
        guideline_usages: One-to-many with GuidelineUsageModel
    """

    __tablename__ = "sessions"

    summary: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Rolling conversation summary",
    )

    # Relationships
    messages = relationship(
        "MessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MessageModel.created_at",
    )
    guideline_usages = relationship(
        "GuidelineUsageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
