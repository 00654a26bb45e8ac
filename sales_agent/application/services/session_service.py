"""
Session service orchestrator.

Coordinates session lifecycle operations: creation, listing with
counts, statistics and cascading deletion.

Dependencies: sales_agent.application.adapters.sales_store
System role: Session use case orchestration
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.boundary.db.models import SessionModel

logger = logging.getLogger(__name__)


def session_to_dict(session: SessionModel) -> dict:
    return {
        "id": session.id,
        "summary": session.summary,
        "created_at": session.created_at,
        "updated_at": session.updated_at,
    }


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.store = SalesStore(db)

    async def create_session(self) -> dict:
        """
        Create a new empty session.

        Returns:
            dict: Created session data
        """
        session = await self.store.create_session()
        await self.store.commit()
        return session_to_dict(session)

    async def get_session(self, session_id: UUID) -> dict:
        """
        Get session by ID.

        Args:
            session_id: Session UUID

        Returns:
            dict: Session data with id, summary, created_at, updated_at

        Raises:
            ValueError: If session not found
        """
        session = await self.store.get_session(session_id)
        if not session:
            raise ValueError(f"Session {session_id} does not exist")
        return session_to_dict(session)

    async def get_all_sessions(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        Get all sessions newest first, with message and usage counts.

        Args:
            limit: Maximum number of sessions to return
            offset: Number of sessions to skip

        Returns:
            list[dict]: Session dicts with message_count and guideline_usage_count
        """
        rows = await self.store.list_sessions(limit=limit, offset=offset)
        return [
            {
                **session_to_dict(session),
                "message_count": message_count,
                "guideline_usage_count": usage_count,
            }
            for session, message_count, usage_count in rows
        ]

    async def get_statistics(self, days: int = 30) -> dict:
        """Totals and per-day session counts for the last `days` dates."""
        return await self.store.get_statistics(days=days)

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete session by ID, cascading to its messages and usage records.

        Args:
            session_id: Session UUID

        Returns:
            bool: True if deleted

        Raises:
            ValueError: If session not found
        """
        deleted = await self.store.delete_session(session_id)
        if not deleted:
            raise ValueError(f"Session {session_id} does not exist")
        await self.store.commit()
        logger.info(f"Deleted session {session_id}")
        return True

    async def delete_sessions(self, session_ids: Sequence[UUID]) -> int:
        """
        Delete several sessions; unknown IDs are ignored.

        Args:
            session_ids: Session UUIDs

        Returns:
            int: Number of sessions deleted
        """
        count = await self.store.delete_sessions(session_ids)
        await self.store.commit()
        logger.info(f"Bulk deleted {count} sessions")
        return count
