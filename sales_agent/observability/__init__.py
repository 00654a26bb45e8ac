"""
Observability module.

Provides logging configuration, structured logging helpers,
correlation ID tracking and request middleware.
"""

from sales_agent.observability.correlation import get_correlation_id, set_correlation_id
from sales_agent.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
