"""
Test suite for ConversationService.

System role: Verification of transcript and usage ledger use cases
"""

import uuid

import pytest

from sales_agent.application.services.conversation_service import ConversationService
from sales_agent.boundary.db.models import MessageRole


@pytest.fixture
def service(test_async_db) -> ConversationService:
    """Provide ConversationService over the test database."""
    return ConversationService(db=test_async_db)


@pytest.fixture
async def turn(sales_store, make_guideline):
    """Provide a session holding one answered turn with one applied guideline."""
    guideline = await make_guideline("Precio", "hard", 10, ["precio"])
    session = await sales_store.create_session()
    await sales_store.add_message(session.id, MessageRole.USER, "precio?")
    reply = await sales_store.add_message(session.id, MessageRole.ASSISTANT, "Agendemos")
    usage = await sales_store.record_usage(session.id, reply.id, guideline.id)
    await sales_store.commit()
    return {"session": session, "reply": reply, "usage": usage, "guideline": guideline}


class TestMessages:
    """Test suite for message operations."""

    @pytest.mark.asyncio
    async def test_get_messages_should_attach_usage_to_assistant_reply(self, service, turn) -> None:
        """Test transcript is chronological with usage on the reply."""
        messages = await service.get_messages(turn["session"].id)

        assert [m["role"] for m in messages] == ["user", "assistant"]
        assert messages[0]["guideline_usages"] == []
        assert messages[1]["guideline_usages"][0]["guideline"]["title"] == "Precio"

    @pytest.mark.asyncio
    async def test_get_messages_should_raise_for_missing_session(self, service) -> None:
        """Test unknown sessions raise ValueError."""
        with pytest.raises(ValueError):
            await service.get_messages(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_add_message_should_persist(self, service, sales_store) -> None:
        """Test a manually added message is stored."""
        session = await sales_store.create_session()
        await sales_store.commit()

        message = await service.add_message(session.id, "user", "hola")

        assert message["role"] == "user"
        assert [m.content for m in await sales_store.list_messages(session.id)] == ["hola"]


class TestGuidelineUsage:
    """Test suite for usage ledger queries."""

    @pytest.mark.asyncio
    async def test_get_session_usage_should_include_guideline_and_message(self, service, turn) -> None:
        """Test session usage carries both relations."""
        usages = await service.get_session_usage(turn["session"].id)

        assert len(usages) == 1
        assert usages[0]["guideline"]["id"] == turn["guideline"].id
        assert usages[0]["message"]["content"] == "Agendemos"

    @pytest.mark.asyncio
    async def test_get_session_usage_detail_should_reject_other_session(
        self, service, sales_store, turn
    ) -> None:
        """Test a usage id looked up under the wrong session is not found."""
        other = await sales_store.create_session()
        await sales_store.commit()

        with pytest.raises(ValueError):
            await service.get_session_usage_detail(other.id, turn["usage"].id)

    @pytest.mark.asyncio
    async def test_get_message_usage_should_list_guidelines(self, service, turn) -> None:
        """Test usage by message returns the applied guideline."""
        usages = await service.get_message_usage(turn["reply"].id)

        assert [u["guideline_id"] for u in usages] == [turn["guideline"].id]
        assert "message" not in usages[0]
