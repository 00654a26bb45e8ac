"""
Core business logic module.

Contains the exception hierarchy, model drivers and the agentic system
(shared turn components and the sales agent pipeline).
"""

from sales_agent.core.exceptions import (
    ContextUnavailable,
    GuidelineSelectionFailed,
    ProviderCallError,
    ProviderConfigError,
    SalesAgentException,
    SalesPipelineError,
    SummaryGenerationFailed,
)

__all__ = [
    "ContextUnavailable",
    "GuidelineSelectionFailed",
    "ProviderCallError",
    "ProviderConfigError",
    "SalesAgentException",
    "SalesPipelineError",
    "SummaryGenerationFailed",
]
