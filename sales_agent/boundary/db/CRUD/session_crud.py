"""
Session CRUD operations.

Provides Create, Read, Update, Delete operations for SessionModel
with summary updates, per-session counts and aggregate statistics.

Dependencies: sqlalchemy, sales_agent.boundary.db.models
System role: Session persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.boundary.db.models.session_model import SessionModel
from sales_agent.boundary.db.models.message_model import MessageModel
from sales_agent.boundary.db.models.guideline_usage_model import GuidelineUsageModel
from sales_agent.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with summary updates and listing queries that carry
    message and usage counts.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_all_with_counts(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[tuple[SessionModel, int, int]]:
        """
        Retrieve sessions newest first with their message and usage counts.

        Args:
            session: Async database session
            limit: Maximum number of sessions to return
            offset: Number of sessions to skip

        Returns:
            Sequence of (SessionModel, message_count, usage_count) tuples
        """
        message_counts = (
            select(
                MessageModel.session_id.label("session_id"),
                func.count(MessageModel.id).label("message_count"),
            )
            .group_by(MessageModel.session_id)
            .subquery()
        )
        usage_counts = (
            select(
                GuidelineUsageModel.session_id.label("session_id"),
                func.count(GuidelineUsageModel.id).label("usage_count"),
            )
            .group_by(GuidelineUsageModel.session_id)
            .subquery()
        )
        stmt = (
            select(
                SessionModel,
                func.coalesce(message_counts.c.message_count, 0),
                func.coalesce(usage_counts.c.usage_count, 0),
            )
            .outerjoin(message_counts, message_counts.c.session_id == SessionModel.id)
            .outerjoin(usage_counts, usage_counts.c.session_id == SessionModel.id)
            .order_by(SessionModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def update_summary(
        self,
        session: AsyncSession,
        id: UUID,
        summary: str,
    ) -> SessionModel | None:
        """
        Replace the rolling summary of a session.

        Args:
            session: Async database session
            id: Session UUID
            summary: New summary text

        Returns:
            Updated SessionModel if found, None otherwise
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        instance.summary = summary
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_statistics(
        self,
        session: AsyncSession,
        days: int = 30,
    ) -> dict[str, Any]:
        """
        Aggregate totals and per-day session creation counts.

        Args:
            session: Async database session
            days: Number of most recent creation dates to report

        Returns:
            dict with total_sessions, total_messages, total_guideline_usages
            and sessions_by_date (list of {date, count}, newest first)
        """
        total_sessions = await self.count(session)

        total_messages = (
            await session.execute(select(func.count()).select_from(MessageModel))
        ).scalar_one()
        total_usages = (
            await session.execute(select(func.count()).select_from(GuidelineUsageModel))
        ).scalar_one()

        day = func.date(SessionModel.created_at).label("day")
        by_date_stmt = (
            select(day, func.count(SessionModel.id))
            .group_by(day)
            .order_by(day.desc())
            .limit(days)
        )
        rows = (await session.execute(by_date_stmt)).all()

        return {
            "total_sessions": total_sessions,
            "total_messages": total_messages,
            "total_guideline_usages": total_usages,
            "sessions_by_date": [
                {"date": str(row[0]), "count": row[1]} for row in rows
            ],
        }


session_crud = SessionCRUD()
