"""
Message CRUD operations.

Append-only transcript access: chronological listing for display and
bounded newest-first reads for turn context and summarization.

Dependencies: sqlalchemy, sales_agent.boundary.db.models
System role: Message persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sales_agent.boundary.db.models.message_model import MessageModel, MessageRole
from sales_agent.boundary.db.models.guideline_usage_model import GuidelineUsageModel
from sales_agent.boundary.db.CRUD.base_crud import BaseCRUD


# Within one timestamp the user message precedes the reply it triggered.
_ROLE_RANK = case((MessageModel.role == MessageRole.USER, 0), else_=1)


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def add_message(
        self,
        session: AsyncSession,
        session_id: UUID,
        role: MessageRole,
        content: str,
    ) -> MessageModel:
        """
        Append a message to a session transcript.

        Args:
            session: Async database session
            session_id: Owning session UUID
            role: USER or ASSISTANT
            content: Message text

        Returns:
            Created MessageModel
        """
        return await self.create(
            session,
            session_id=session_id,
            role=MessageRole(role),
            content=content,
        )

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[MessageModel]:
        """
        Retrieve a session's messages oldest first, with their usage records.

        Args:
            session: Async database session
            session_id: Session UUID

        Returns:
            Sequence of MessageModel in chronological order
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .options(
                selectinload(MessageModel.guideline_usages)
                .selectinload(GuidelineUsageModel.guideline)
            )
            .order_by(MessageModel.created_at.asc(), _ROLE_RANK.asc(), MessageModel.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_recent(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int = 10,
    ) -> Sequence[MessageModel]:
        """
        Retrieve the most recent messages of a session, newest first.

        Args:
            session: Async database session
            session_id: Session UUID
            limit: Maximum number of messages

        Returns:
            Sequence of MessageModel in reverse-chronological order
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.created_at.desc(), _ROLE_RANK.desc(), MessageModel.id.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


message_crud = MessageCRUD()
