"""
Conversation service orchestrator.

Transcript and usage ledger queries for the HTTP layer: messages of a
session, manual message creation and guideline usage lookups.

Dependencies: sales_agent.application.adapters.sales_store
System role: Message and guideline usage use cases
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.application.services.guideline_service import guideline_to_dict
from sales_agent.boundary.db.models import GuidelineUsageModel, MessageModel, MessageRole


def message_to_dict(message: MessageModel) -> dict:
    return {
        "id": message.id,
        "session_id": message.session_id,
        "role": MessageRole(message.role).value,
        "content": message.content,
        "created_at": message.created_at,
    }


def usage_to_dict(
    usage: GuidelineUsageModel,
    include_guideline: bool = True,
    include_message: bool = False,
) -> dict:
    """
    Plain dict view of a usage record.

    Only request relationships the query eagerly loaded.
    """
    data = {
        "id": usage.id,
        "session_id": usage.session_id,
        "message_id": usage.message_id,
        "guideline_id": usage.guideline_id,
        "used_at": usage.used_at,
    }
    if include_guideline and usage.guideline is not None:
        data["guideline"] = guideline_to_dict(usage.guideline)
    if include_message and usage.message is not None:
        data["message"] = message_to_dict(usage.message)
    return data


class ConversationService:
    """Conversation service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize conversation service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.store = SalesStore(db)

    async def _require_session(self, session_id: UUID) -> None:
        if not await self.store.get_session(session_id):
            raise ValueError(f"Session {session_id} does not exist")

    async def get_messages(self, session_id: UUID) -> list[dict]:
        """
        Get a session's messages oldest first, each with its usage records.

        Args:
            session_id: Session UUID

        Returns:
            list[dict]: Messages with guideline_usages

        Raises:
            ValueError: If session not found
        """
        await self._require_session(session_id)
        messages = await self.store.list_messages(session_id)
        return [
            {
                **message_to_dict(m),
                "guideline_usages": [usage_to_dict(u) for u in m.guideline_usages],
            }
            for m in messages
        ]

    async def add_message(self, session_id: UUID, role: str, content: str) -> dict:
        """
        Append a message to a session.

        Args:
            session_id: Session UUID
            role: "user" or "assistant"
            content: Message text

        Returns:
            dict: Created message

        Raises:
            ValueError: If session not found or role invalid
        """
        await self._require_session(session_id)
        message = await self.store.add_message(session_id, MessageRole(role), content)
        await self.store.commit()
        return {**message_to_dict(message), "guideline_usages": []}

    async def get_session_usage(self, session_id: UUID) -> list[dict]:
        """
        Get a session's guideline usage, most recent first.

        Raises:
            ValueError: If session not found
        """
        await self._require_session(session_id)
        usages = await self.store.list_usages_by_session(session_id)
        return [usage_to_dict(u, include_message=True) for u in usages]

    async def get_session_usage_detail(self, session_id: UUID, usage_id: UUID) -> dict:
        """
        Get one usage record of a session with guideline and message.

        Args:
            session_id: Session UUID the record must belong to
            usage_id: Usage UUID

        Returns:
            dict: Usage record

        Raises:
            ValueError: If the record is missing or belongs to another session
        """
        usage = await self.store.get_usage(usage_id)
        if not usage or usage.session_id != session_id:
            raise ValueError(f"Guideline usage {usage_id} does not exist in session {session_id}")
        return usage_to_dict(usage, include_message=True)

    async def get_message_usage(self, message_id: UUID) -> list[dict]:
        """Usage records attached to one message, with their guidelines."""
        usages = await self.store.list_usages_by_message(message_id)
        return [usage_to_dict(u) for u in usages]
