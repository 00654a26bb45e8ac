"""
Test suite for SessionService and GuidelineService.

System role: Verification of session and guideline use cases
"""

import pytest

from sales_agent.application.services.guideline_service import GuidelineService
from sales_agent.application.services.session_service import SessionService
from sales_agent.boundary.db.models import MessageRole


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    """Provide SessionService over the test database."""
    return SessionService(db=test_async_db)


@pytest.fixture
def guideline_service(test_async_db) -> GuidelineService:
    """Provide GuidelineService over the test database."""
    return GuidelineService(db=test_async_db)


class TestSessionService:
    """Test suite for SessionService."""

    @pytest.mark.asyncio
    async def test_create_session_should_return_empty_session(self, session_service) -> None:
        """Test a new session has an id and no summary."""
        session = await session_service.create_session()

        assert session["id"] is not None
        assert session["summary"] is None

    @pytest.mark.asyncio
    async def test_get_session_should_raise_for_missing(self, session_service, session_id) -> None:
        """Test missing sessions raise ValueError."""
        with pytest.raises(ValueError, match="does not exist"):
            await session_service.get_session(session_id)

    @pytest.mark.asyncio
    async def test_get_all_sessions_should_include_counts(self, session_service, sales_store) -> None:
        """Test listing reports message and usage counts."""
        created = await session_service.create_session()
        await sales_store.add_message(created["id"], MessageRole.USER, "hola")
        await sales_store.commit()

        sessions = await session_service.get_all_sessions()

        assert sessions[0]["id"] == created["id"]
        assert sessions[0]["message_count"] == 1
        assert sessions[0]["guideline_usage_count"] == 0

    @pytest.mark.asyncio
    async def test_delete_session_should_raise_for_missing(self, session_service, session_id) -> None:
        """Test deleting an unknown session raises ValueError."""
        with pytest.raises(ValueError):
            await session_service.delete_session(session_id)

    @pytest.mark.asyncio
    async def test_delete_sessions_should_return_count(self, session_service) -> None:
        """Test bulk delete reports how many sessions were removed."""
        first = await session_service.create_session()
        second = await session_service.create_session()

        count = await session_service.delete_sessions([first["id"], second["id"]])

        assert count == 2
        assert await session_service.get_all_sessions() == []

    @pytest.mark.asyncio
    async def test_get_statistics_should_count_sessions(self, session_service) -> None:
        """Test statistics reflect created sessions."""
        await session_service.create_session()

        stats = await session_service.get_statistics()

        assert stats["total_sessions"] == 1
        assert stats["total_messages"] == 0


class TestGuidelineService:
    """Test suite for GuidelineService."""

    @pytest.mark.asyncio
    async def test_list_guidelines_should_return_plain_dicts(self, guideline_service, make_guideline) -> None:
        """Test guidelines are serialized with string strength."""
        await make_guideline("Precio", "hard", 10, ["precio"])

        guidelines = await guideline_service.list_guidelines()

        assert guidelines[0]["title"] == "Precio"
        assert guidelines[0]["strength"] == "hard"
        assert guidelines[0]["triggers"] == ["precio"]

    @pytest.mark.asyncio
    async def test_get_guideline_should_raise_for_missing(self, guideline_service, session_id) -> None:
        """Test unknown guideline ids raise ValueError."""
        with pytest.raises(ValueError):
            await guideline_service.get_guideline(session_id)

    @pytest.mark.asyncio
    async def test_search_guidelines_should_accept_strength_string(
        self, guideline_service, make_guideline
    ) -> None:
        """Test the strength filter takes the wire value."""
        await make_guideline("Precio", "hard", 10)
        await make_guideline("Tono", "soft", 7)

        guidelines = await guideline_service.search_guidelines(strength="soft")

        assert [g["title"] for g in guidelines] == ["Tono"]
