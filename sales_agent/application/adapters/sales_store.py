"""
Sales store persistence port.

Single data-access boundary for the turn pipeline and the application
services. Wraps the CRUD singletons around one request-scoped
AsyncSession so every component shares the same connection and
transaction, and tests can substitute a double.

Dependencies: sales_agent.boundary.db.CRUD, sales_agent.boundary.db.models
System role: Persistence port over guidelines, sessions, messages and usage
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.boundary.db.CRUD import (
    guideline_crud,
    guideline_usage_crud,
    message_crud,
    session_crud,
)
from sales_agent.boundary.db.models import (
    GuidelineModel,
    GuidelineStrength,
    GuidelineUsageModel,
    MessageModel,
    MessageRole,
    SessionModel,
)


class SalesStore:
    """
    Persistence port used by the sales agent.

    Methods flush but never commit; callers decide when a unit of work
    ends by calling commit().
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize store around a database session.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.db.commit()

    # Guidelines

    async def list_guidelines(self) -> Sequence[GuidelineModel]:
        return await guideline_crud.get_all(self.db)

    async def get_guideline(self, guideline_id: UUID) -> GuidelineModel | None:
        return await guideline_crud.get_by_id(self.db, guideline_id)

    async def get_unused_guidelines(
        self,
        session_id: UUID,
        strength: GuidelineStrength,
    ) -> Sequence[GuidelineModel]:
        """Active guidelines of a strength not yet used in the session."""
        return await guideline_crud.get_unused_in_session(self.db, session_id, strength)

    async def search_guidelines(self, **filters: Any) -> list[GuidelineModel]:
        """
        Filter guidelines.

        Args:
            **filters: strength, priority_min, priority_max, triggers,
                active, single_use, limit (see GuidelineCRUD.search)

        Returns:
            list[GuidelineModel]: Matching guidelines, priority desc
        """
        return await guideline_crud.search(self.db, **filters)

    # Sessions

    async def get_session(self, session_id: UUID) -> SessionModel | None:
        return await session_crud.get_by_id(self.db, session_id)

    async def create_session(self) -> SessionModel:
        return await session_crud.create(self.db)

    async def update_summary(self, session_id: UUID, summary: str) -> SessionModel | None:
        return await session_crud.update_summary(self.db, session_id, summary)

    async def delete_session(self, session_id: UUID) -> bool:
        """Delete a session; messages and usage rows cascade."""
        return await session_crud.delete_by_id(self.db, session_id)

    async def delete_sessions(self, session_ids: Sequence[UUID]) -> int:
        return await session_crud.delete_many(self.db, session_ids)

    async def list_sessions(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[tuple[SessionModel, int, int]]:
        """Sessions newest first as (session, message_count, usage_count)."""
        return await session_crud.get_all_with_counts(self.db, limit=limit, offset=offset)

    async def get_statistics(self, days: int = 30) -> dict[str, Any]:
        return await session_crud.get_statistics(self.db, days=days)

    # Messages

    async def list_messages(self, session_id: UUID) -> Sequence[MessageModel]:
        """Messages of a session in chronological order."""
        return await message_crud.get_by_session(self.db, session_id)

    async def add_message(
        self,
        session_id: UUID,
        role: MessageRole | str,
        content: str,
    ) -> MessageModel:
        return await message_crud.add_message(self.db, session_id, MessageRole(role), content)

    async def get_recent_messages(
        self,
        session_id: UUID,
        limit: int,
    ) -> Sequence[MessageModel]:
        """Most recent messages of a session, newest first."""
        return await message_crud.get_recent(self.db, session_id, limit=limit)

    # Guideline usage

    async def list_usages_by_session(self, session_id: UUID) -> Sequence[GuidelineUsageModel]:
        return await guideline_usage_crud.get_by_session(self.db, session_id)

    async def list_usages_by_message(self, message_id: UUID) -> Sequence[GuidelineUsageModel]:
        return await guideline_usage_crud.get_by_message(self.db, message_id)

    async def get_usage(self, usage_id: UUID) -> GuidelineUsageModel | None:
        return await guideline_usage_crud.get_with_relations(self.db, usage_id)

    async def record_usage(
        self,
        session_id: UUID,
        message_id: UUID,
        guideline_id: UUID,
    ) -> GuidelineUsageModel:
        return await guideline_usage_crud.record(
            self.db,
            session_id=session_id,
            message_id=message_id,
            guideline_id=guideline_id,
        )
