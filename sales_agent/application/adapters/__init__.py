"""Supporting adapters."""

from .sales_store import SalesStore

__all__ = ["SalesStore"]
