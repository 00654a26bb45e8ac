"""
Test suite for ContextGatherer.

System role: Verification of turn context reads
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sales_agent.boundary.db.models import MessageRole
from sales_agent.core.agentic_system.shared.context_gatherer import ContextGatherer
from sales_agent.core.exceptions import ContextUnavailable


class TestGatherContext:
    """Test suite for ContextGatherer.gather_context()."""

    @pytest.mark.asyncio
    async def test_gather_context_should_return_last_four_in_chronological_order(self, sales_store) -> None:
        """Test only the four most recent messages are returned, oldest first."""
        # Arrange
        conversation = await sales_store.create_session()
        for i in range(6):
            role = MessageRole.USER if i % 2 == 0 else MessageRole.ASSISTANT
            await sales_store.add_message(conversation.id, role, f"m{i}")
        await sales_store.commit()
        gatherer = ContextGatherer(sales_store)

        # Act
        context = await gatherer.gather_context(conversation.id, "m5")

        # Assert
        assert [m.content for m in context.recent_messages] == ["m2", "m3", "m4", "m5"]
        assert [m.role for m in context.recent_messages] == ["user", "assistant", "user", "assistant"]
        assert context.message == "m5"

    @pytest.mark.asyncio
    async def test_gather_context_should_include_summary(self, sales_store) -> None:
        """Test the stored session summary is carried into the context."""
        conversation = await sales_store.create_session()
        await sales_store.update_summary(conversation.id, "Asked about pricing")
        await sales_store.commit()

        context = await ContextGatherer(sales_store).gather_context(conversation.id, "hi")

        assert context.session_summary == "Asked about pricing"

    @pytest.mark.asyncio
    async def test_gather_context_should_tolerate_missing_session(self, sales_store, session_id) -> None:
        """Test an unknown session yields no summary and no messages."""
        context = await ContextGatherer(sales_store).gather_context(session_id, "hi")

        assert context.session_summary is None
        assert context.recent_messages == []

    @pytest.mark.asyncio
    async def test_gather_context_should_raise_context_unavailable_on_store_error(self, session_id) -> None:
        """Test store failures are wrapped in ContextUnavailable."""
        # Arrange
        store = MagicMock()
        store.get_session = AsyncMock(side_effect=RuntimeError("connection reset"))
        store.get_recent_messages = AsyncMock(return_value=[])

        # Act / Assert
        with pytest.raises(ContextUnavailable, match="Failed to gather conversation context"):
            await ContextGatherer(store).gather_context(session_id, "hi")
