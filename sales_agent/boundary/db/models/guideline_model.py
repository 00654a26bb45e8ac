"""
Guideline ORM model.

Represents a behavioral rule the sales agent is instructed to follow.
Guidelines are shared across sessions and never mutated by the turn pipeline.

Dependencies: sqlalchemy, sales_agent.boundary.db.base
System role: Rule store persistence
"""

import enum

from sqlalchemy import Boolean, Enum, Integer, JSON, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sales_agent.boundary.db.base import Base, UUIDMixin, TimestampMixin


class GuidelineStrength(str, enum.Enum):
    """
    How strictly a guideline must be followed.

    HARD: Mandatory rule the model must obey
    SOFT: Advisory tactic the model should prefer when possible
    """

    HARD = "hard"
    SOFT = "soft"


class GuidelineModel(Base, UUIDMixin, TimestampMixin):
    """
    Guideline ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Short human label
        content: Instruction text rendered into the system prompt
        strength: HARD or SOFT
        priority: Higher is more important; drives store ordering
        triggers: Lowercase substrings; empty list means always eligible
        active: Inactive guidelines are never selected
        single_use: Reserved flag, not enforced by the selector
        embedding: Optional serialized vector, unused by the pipeline

    Relationships:
        usages: One-to-many with GuidelineUsageModel (cascade delete)
    """

    __tablename__ = "guidelines"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    strength: Mapped[GuidelineStrength] = mapped_column(
        Enum(GuidelineStrength, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )

    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    triggers: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Lowercase trigger substrings",
    )

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    single_use: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    embedding: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True, default=None)

    # Relationships
    usages = relationship(
        "GuidelineUsageModel",
        back_populates="guideline",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
