"""
Guideline usage CRUD operations.

Usage ledger reads (by session, by message, by id) with the related
guideline eagerly loaded for display.

Dependencies: sqlalchemy, sales_agent.boundary.db.models
System role: Usage ledger persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sales_agent.boundary.db.models.guideline_usage_model import GuidelineUsageModel
from sales_agent.boundary.db.CRUD.base_crud import BaseCRUD


class GuidelineUsageCRUD(BaseCRUD[GuidelineUsageModel]):
    """CRUD operations for GuidelineUsageModel."""

    def __init__(self) -> None:
        """Initialize GuidelineUsageCRUD with GuidelineUsageModel."""
        super().__init__(GuidelineUsageModel)

    async def record(
        self,
        session: AsyncSession,
        session_id: UUID,
        message_id: UUID,
        guideline_id: UUID,
    ) -> GuidelineUsageModel:
        """
        Record that a guideline fired on an assistant message.

        Args:
            session: Async database session
            session_id: Session UUID
            message_id: Assistant message UUID
            guideline_id: Guideline UUID

        Returns:
            Created GuidelineUsageModel
        """
        return await self.create(
            session,
            session_id=session_id,
            message_id=message_id,
            guideline_id=guideline_id,
        )

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[GuidelineUsageModel]:
        """
        Retrieve a session's usage records, most recent first.

        Args:
            session: Async database session
            session_id: Session UUID

        Returns:
            Sequence of GuidelineUsageModel with guideline and message loaded
        """
        stmt = (
            select(GuidelineUsageModel)
            .where(GuidelineUsageModel.session_id == session_id)
            .options(
                selectinload(GuidelineUsageModel.guideline),
                selectinload(GuidelineUsageModel.message),
            )
            .order_by(GuidelineUsageModel.used_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_message(
        self,
        session: AsyncSession,
        message_id: UUID,
    ) -> Sequence[GuidelineUsageModel]:
        """
        Retrieve the usage records attached to one message, most recent first.

        Args:
            session: Async database session
            message_id: Message UUID

        Returns:
            Sequence of GuidelineUsageModel with guideline loaded
        """
        stmt = (
            select(GuidelineUsageModel)
            .where(GuidelineUsageModel.message_id == message_id)
            .options(selectinload(GuidelineUsageModel.guideline))
            .order_by(GuidelineUsageModel.used_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_with_relations(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> GuidelineUsageModel | None:
        """
        Retrieve a usage record with guideline, message and session loaded.

        Args:
            session: Async database session
            id: Usage UUID

        Returns:
            GuidelineUsageModel if found, None otherwise
        """
        stmt = (
            select(GuidelineUsageModel)
            .where(GuidelineUsageModel.id == id)
            .options(
                selectinload(GuidelineUsageModel.guideline),
                selectinload(GuidelineUsageModel.message),
                selectinload(GuidelineUsageModel.session),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


guideline_usage_crud = GuidelineUsageCRUD()
