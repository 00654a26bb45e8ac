"""
Guideline CRUD operations.

Rule store queries: full listing, filtered search, and the
"active and not yet used in this session" query the selector relies on.

Dependencies: sqlalchemy, sales_agent.boundary.db.models
System role: Guideline persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.boundary.db.models.guideline_model import GuidelineModel, GuidelineStrength
from sales_agent.boundary.db.models.guideline_usage_model import GuidelineUsageModel
from sales_agent.boundary.db.CRUD.base_crud import BaseCRUD


class GuidelineCRUD(BaseCRUD[GuidelineModel]):
    """
    CRUD operations for GuidelineModel.

    All listing queries return guidelines ordered by priority (highest first),
    ties broken by creation time.
    """

    def __init__(self) -> None:
        """Initialize GuidelineCRUD with GuidelineModel."""
        super().__init__(GuidelineModel)

    @staticmethod
    def _ordering():
        return (GuidelineModel.priority.desc(), GuidelineModel.created_at.asc())

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[GuidelineModel]:
        """
        Retrieve all guidelines, highest priority first.

        Args:
            session: Async database session
            limit: Maximum number of guidelines to return
            offset: Number of guidelines to skip

        Returns:
            Sequence of GuidelineModel
        """
        stmt = select(GuidelineModel).order_by(*self._ordering()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_unused_in_session(
        self,
        session: AsyncSession,
        session_id: UUID,
        strength: GuidelineStrength,
    ) -> Sequence[GuidelineModel]:
        """
        Retrieve active guidelines of a strength never recorded for a session.

        Args:
            session: Async database session
            session_id: Conversation whose usage ledger excludes guidelines
            strength: HARD or SOFT

        Returns:
            Sequence of GuidelineModel in store order (priority desc)
        """
        used_ids = (
            select(GuidelineUsageModel.guideline_id)
            .where(GuidelineUsageModel.session_id == session_id)
        )
        stmt = (
            select(GuidelineModel)
            .where(
                GuidelineModel.strength == strength,
                GuidelineModel.active.is_(True),
                GuidelineModel.id.not_in(used_ids),
            )
            .order_by(*self._ordering())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search(
        self,
        session: AsyncSession,
        strength: GuidelineStrength | None = None,
        priority_min: int | None = None,
        priority_max: int | None = None,
        triggers: list[str] | None = None,
        active: bool | None = None,
        single_use: bool | None = None,
        limit: int | None = None,
    ) -> list[GuidelineModel]:
        """
        Search guidelines with optional composable filters.

        Trigger filtering keeps guidelines sharing at least one trigger
        with the requested list (case-insensitive). It runs in Python because
        JSON containment operators differ between PostgreSQL and SQLite, so
        the limit is applied after it.

        Args:
            session: Async database session
            strength: Exact strength match
            priority_min: Inclusive lower priority bound
            priority_max: Inclusive upper priority bound
            triggers: Any-overlap trigger filter
            active: Exact active flag match
            single_use: Exact single_use flag match
            limit: Maximum number of results

        Returns:
            List of GuidelineModel ordered by priority desc
        """
        stmt = select(GuidelineModel)
        if strength is not None:
            stmt = stmt.where(GuidelineModel.strength == strength)
        if priority_min is not None:
            stmt = stmt.where(GuidelineModel.priority >= priority_min)
        if priority_max is not None:
            stmt = stmt.where(GuidelineModel.priority <= priority_max)
        if active is not None:
            stmt = stmt.where(GuidelineModel.active.is_(active))
        if single_use is not None:
            stmt = stmt.where(GuidelineModel.single_use.is_(single_use))
        stmt = stmt.order_by(*self._ordering())

        result = await session.execute(stmt)
        guidelines = list(result.scalars().all())

        if triggers:
            wanted = {t.strip().lower() for t in triggers if t.strip()}
            guidelines = [
                g for g in guidelines
                if wanted.intersection(t.lower() for t in (g.triggers or []))
            ]

        if limit is not None:
            guidelines = guidelines[:limit]
        return guidelines


guideline_crud = GuidelineCRUD()
