"""
Dependency injection container.

Factory functions for FastAPI dependencies. The LLM driver is a process
singleton held by the service cache; database sessions, the sales store
and services are created per request.

Dependencies: sales_agent.configs, sales_agent.application, sales_agent.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.application.adapters import SalesStore
from sales_agent.application.services import (
    ConversationService,
    GuidelineService,
    SessionService,
)
from sales_agent.boundary.db import get_async_db
from sales_agent.configs import Settings, get_settings
from sales_agent.core.agentic_system.sales_agent.sales_pipeline import SalesAgentPipeline
from sales_agent.core.llm import LLMDriver, create_llm_driver


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._llm_driver = None

    @property
    def llm_driver(self) -> LLMDriver:
        """Get cached LLM driver, created on first access."""
        if self._llm_driver is None:
            self._llm_driver = create_llm_driver(get_settings().llm)
        return self._llm_driver

    def clear(self) -> None:
        """Clear all cached instances."""
        self._llm_driver = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_llm_driver() -> LLMDriver:
    """
    Get the process-wide LLM driver.

    Raises:
        ProviderConfigError: If provider credentials are missing
    """
    return get_service_cache().llm_driver


def get_sales_store(db: AsyncSession = Depends(get_async_db)) -> SalesStore:
    """Request-scoped persistence port."""
    return SalesStore(db)


def get_sales_pipeline(
    store: SalesStore = Depends(get_sales_store),
    llm_driver: LLMDriver = Depends(get_llm_driver),
    settings: Settings = Depends(get_settings_dependency),
) -> SalesAgentPipeline:
    """
    Get sales agent pipeline for one request.

    Args:
        store: Request-scoped sales store (injected)
        llm_driver: Cached LLM driver (injected)
        settings: Application settings (injected)

    Returns:
        SalesAgentPipeline: Pipeline bound to this request's database session
    """
    return SalesAgentPipeline(store=store, llm_driver=llm_driver, settings=settings.agent)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_guideline_service(db: AsyncSession = Depends(get_async_db)) -> GuidelineService:
    """Get guideline service instance."""
    return GuidelineService(db=db)


def get_conversation_service(
    db: AsyncSession = Depends(get_async_db),
) -> ConversationService:
    """Get conversation (messages and usage) service instance."""
    return ConversationService(db=db)
