"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - GuidelineModel, SessionModel, MessageModel, GuidelineUsageModel: Domain entities
  - GuidelineStrength, MessageRole: Enum types
  - guideline_crud, session_crud, message_crud, guideline_usage_crud: CRUD singletons

Dependencies: sqlalchemy, sales_agent.configs
System role: Database adapter providing persistent storage for guidelines,
sessions, messages and the guideline usage ledger.
"""

from sales_agent.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from sales_agent.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from sales_agent.boundary.db.models import (
    GuidelineModel,
    GuidelineStrength,
    GuidelineUsageModel,
    MessageModel,
    MessageRole,
    SessionModel,
)
from sales_agent.boundary.db.CRUD import (
    BaseCRUD,
    GuidelineCRUD,
    GuidelineUsageCRUD,
    MessageCRUD,
    SessionCRUD,
    guideline_crud,
    guideline_usage_crud,
    message_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "GuidelineModel",
    "GuidelineStrength",
    "GuidelineUsageModel",
    "MessageModel",
    "MessageRole",
    "SessionModel",
    # CRUD classes
    "BaseCRUD",
    "GuidelineCRUD",
    "GuidelineUsageCRUD",
    "MessageCRUD",
    "SessionCRUD",
    # CRUD singletons
    "guideline_crud",
    "guideline_usage_crud",
    "message_crud",
    "session_crud",
]
