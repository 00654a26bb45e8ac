"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from sales_agent.boundary.db.CRUD import session_crud, guideline_crud

    # Use singleton instances
    session = await session_crud.get_by_id(db, session_id)

    # Or instantiate classes directly for custom behavior
    from sales_agent.boundary.db.CRUD import SessionCRUD
    custom_crud = SessionCRUD()
"""

from sales_agent.boundary.db.CRUD.base_crud import BaseCRUD
from sales_agent.boundary.db.CRUD.guideline_crud import GuidelineCRUD, guideline_crud
from sales_agent.boundary.db.CRUD.guideline_usage_crud import (
    GuidelineUsageCRUD,
    guideline_usage_crud,
)
from sales_agent.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from sales_agent.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "GuidelineCRUD",
    "guideline_crud",
    "GuidelineUsageCRUD",
    "guideline_usage_crud",
    "MessageCRUD",
    "message_crud",
    "SessionCRUD",
    "session_crud",
]
