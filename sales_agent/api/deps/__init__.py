"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_conversation_service,
    get_guideline_service,
    get_llm_driver,
    get_sales_pipeline,
    get_sales_store,
    get_service_cache,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_conversation_service",
    "get_guideline_service",
    "get_llm_driver",
    "get_sales_pipeline",
    "get_sales_store",
    "get_service_cache",
    "get_session_service",
    "get_settings_dependency",
]
