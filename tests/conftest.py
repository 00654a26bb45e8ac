"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database, sales store, fake LLM driver, guideline factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from collections.abc import Awaitable, Callable

import pytest

from sales_agent.core.llm.base import ChatMessage, LLMDriver, LLMResponse
from sales_agent.core.exceptions import ProviderCallError


class FakeLLMDriver(LLMDriver):
    """
    Scripted LLM driver.

    Returns queued replies in order (then the default reply) and records
    every call. Queued exceptions are raised instead of replying.
    """

    provider_name = "fake"

    def __init__(self, default_reply: str = "Happy to help! Could we book a quick call?") -> None:
        self.default_reply = default_reply
        self.queue: list[str | Exception] = []
        self.calls: list[dict] = []
        self.embed_calls: list[str] = []

    async def chat(self, system, messages) -> LLMResponse:
        normalized = [m if isinstance(m, ChatMessage) else ChatMessage(**m) for m in messages]
        self.calls.append({"system": system, "messages": normalized})
        item = self.queue.pop(0) if self.queue else self.default_reply
        if isinstance(item, Exception):
            raise item
        return LLMResponse(content=item)

    async def embed(self, text: str) -> list[float]:
        self.embed_calls.append(text)
        return [0.0, 0.0, 0.0]


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are enforced so ON DELETE CASCADE behaves like PostgreSQL.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from sales_agent.boundary.db.base import Base
    from sales_agent.boundary.db.connection import enable_sqlite_foreign_keys

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def sales_store(test_async_db):
    """Provide SalesStore bound to the test database."""
    from sales_agent.application.adapters.sales_store import SalesStore

    return SalesStore(test_async_db)


@pytest.fixture
def fake_llm_driver() -> FakeLLMDriver:
    """Provide scripted LLM driver."""
    return FakeLLMDriver()


@pytest.fixture
def failing_llm_driver() -> FakeLLMDriver:
    """Provide LLM driver whose every chat call fails."""
    driver = FakeLLMDriver()

    async def _fail(system, messages):
        driver.calls.append({"system": system, "messages": messages})
        raise ProviderCallError("upstream unavailable", provider="fake", status_code=503)

    driver.chat = _fail
    return driver


@pytest.fixture
def make_guideline(test_async_db) -> Callable[..., Awaitable]:
    """
    Provide factory creating committed guideline rows.

    Returns:
        Callable: async factory(title, strength="hard", priority=5, triggers=None, active=True)
    """
    from sales_agent.boundary.db.CRUD import guideline_crud
    from sales_agent.boundary.db.models import GuidelineStrength

    async def _make(
        title: str,
        strength: str = "hard",
        priority: int = 5,
        triggers: list[str] | None = None,
        active: bool = True,
        single_use: bool = False,
        content: str | None = None,
    ):
        guideline = await guideline_crud.create(
            test_async_db,
            title=title,
            content=content or f"{title} rule",
            strength=GuidelineStrength(strength),
            priority=priority,
            triggers=triggers or [],
            active=active,
            single_use=single_use,
        )
        await test_async_db.commit()
        return guideline

    return _make


@pytest.fixture
def session_id() -> uuid.UUID:
    """Generate a test session ID."""
    return uuid.uuid4()
