"""
Test suite for SessionCRUD database operations.

Covers summary updates, counts, statistics and cascading deletion
against in-memory SQLite with foreign keys enforced.

System role: Verification of session persistence layer
"""

import pytest

from sales_agent.boundary.db.CRUD.session_crud import SessionCRUD
from sales_agent.boundary.db.CRUD import guideline_crud
from sales_agent.boundary.db.models import MessageRole, SessionModel


@pytest.fixture
def crud() -> SessionCRUD:
    """Provide SessionCRUD instance for testing."""
    return SessionCRUD()


@pytest.fixture
async def conversation(sales_store, make_guideline):
    """Provide a session with two messages and one usage record."""
    guideline = await make_guideline("Precio", "hard", 10, ["precio"])
    session = await sales_store.create_session()
    await sales_store.add_message(session.id, MessageRole.USER, "precio?")
    reply = await sales_store.add_message(session.id, MessageRole.ASSISTANT, "Hablemos")
    await sales_store.record_usage(session.id, reply.id, guideline.id)
    await sales_store.commit()
    return session


class TestSessionCRUDInit:
    """Test suite for SessionCRUD initialization."""

    def test_init_should_set_model_to_session_model(self) -> None:
        """Test SessionCRUD initializes with SessionModel."""
        assert SessionCRUD().model == SessionModel


class TestSessionCRUDUpdateSummary:
    """Test suite for SessionCRUD.update_summary()."""

    @pytest.mark.asyncio
    async def test_update_summary_should_replace_summary(self, crud, test_async_db) -> None:
        """Test the latest write wins."""
        session = await crud.create(test_async_db)

        await crud.update_summary(test_async_db, session.id, "first")
        updated = await crud.update_summary(test_async_db, session.id, "second")

        assert updated.summary == "second"

    @pytest.mark.asyncio
    async def test_update_summary_should_return_none_for_missing_session(
        self, crud, test_async_db, session_id
    ) -> None:
        """Test unknown sessions are reported as None."""
        assert await crud.update_summary(test_async_db, session_id, "x") is None


class TestSessionCRUDCounts:
    """Test suite for get_all_with_counts() and get_statistics()."""

    @pytest.mark.asyncio
    async def test_get_all_with_counts_should_count_messages_and_usages(
        self, crud, test_async_db, conversation
    ) -> None:
        """Test per-session counts, including zero for empty sessions."""
        # Arrange
        empty = await crud.create(test_async_db)
        await test_async_db.commit()

        # Act
        rows = await crud.get_all_with_counts(test_async_db)

        # Assert
        counts = {session.id: (messages, usages) for session, messages, usages in rows}
        assert counts[conversation.id] == (2, 1)
        assert counts[empty.id] == (0, 0)
        assert rows[0][0].id == empty.id

    @pytest.mark.asyncio
    async def test_get_statistics_should_total_rows(self, crud, test_async_db, conversation) -> None:
        """Test totals and the per-day breakdown."""
        stats = await crud.get_statistics(test_async_db)

        assert stats["total_sessions"] == 1
        assert stats["total_messages"] == 2
        assert stats["total_guideline_usages"] == 1
        assert len(stats["sessions_by_date"]) == 1
        assert stats["sessions_by_date"][0]["count"] == 1


class TestSessionCRUDDelete:
    """Test suite for cascading deletes."""

    @pytest.mark.asyncio
    async def test_delete_by_id_should_cascade_to_messages_and_usages(
        self, crud, test_async_db, sales_store, conversation
    ) -> None:
        """Test deleting a session removes its transcript and usage but not guidelines."""
        # Act
        deleted = await crud.delete_by_id(test_async_db, conversation.id)
        await test_async_db.commit()

        # Assert
        assert deleted is True
        assert await sales_store.list_messages(conversation.id) == []
        assert await sales_store.list_usages_by_session(conversation.id) == []
        assert await guideline_crud.count(test_async_db) == 1

    @pytest.mark.asyncio
    async def test_delete_many_should_return_number_deleted(
        self, crud, test_async_db, conversation, session_id
    ) -> None:
        """Test bulk delete ignores unknown ids."""
        other = await crud.create(test_async_db)

        count = await crud.delete_many(test_async_db, [conversation.id, other.id, session_id])
        await test_async_db.commit()

        assert count == 2
        assert await crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_delete_many_should_skip_empty_input(self, crud, test_async_db) -> None:
        """Test an empty id list deletes nothing."""
        assert await crud.delete_many(test_async_db, []) == 0
