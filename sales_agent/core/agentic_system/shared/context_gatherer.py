"""
Conversation context gatherer.

Reads the rolling summary and the latest messages of a session and
packages them as the context of the current turn.

Dependencies: sales_agent.application.adapters.sales_store
System role: First read step of an agent turn
"""

import logging
from uuid import UUID

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.core.agentic_system.shared.conversation_schema import (
    ChatTurn,
    ConversationContext,
)
from sales_agent.core.exceptions import ContextUnavailable

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_WINDOW = 4


class ContextGatherer:
    """Builds ConversationContext from the sales store."""

    def __init__(self, store: SalesStore, window: int = DEFAULT_CONTEXT_WINDOW) -> None:
        """
        Initialize context gatherer.

        Args:
            store: Persistence port shared by the turn
            window: Number of most recent messages to include
        """
        self.store = store
        self.window = window

    async def gather_context(self, session_id: UUID, user_message: str) -> ConversationContext:
        """
        Gather summary and recent messages for a session.

        Args:
            session_id: Session UUID
            user_message: Current user message

        Returns:
            ConversationContext: Recent messages in chronological order

        Raises:
            ContextUnavailable: If the store cannot be read
        """
        try:
            session = await self.store.get_session(session_id)
            recent = await self.store.get_recent_messages(session_id, limit=self.window)
        except Exception as e:
            logger.error(f"Error gathering context: {type(e).__name__}: {e}")
            raise ContextUnavailable(session_id=str(session_id)) from e

        recent_messages = [
            ChatTurn(role=_role_value(m.role), content=m.content)
            for m in reversed(list(recent))
        ]

        return ConversationContext(
            session_id=session_id,
            message=user_message,
            session_summary=(session.summary or None) if session else None,
            recent_messages=recent_messages,
        )


def _role_value(role) -> str:
    return getattr(role, "value", role)
