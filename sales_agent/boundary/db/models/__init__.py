"""
Database models package.

Exports:
  - GuidelineModel, GuidelineStrength: Rule store model and strength enum
  - SessionModel: Conversation thread with rolling summary
  - MessageModel, MessageRole: Transcript entries and role enum
  - GuidelineUsageModel: Usage ledger join record

Dependencies: sqlalchemy, sales_agent.boundary.db.base
System role: Database model definitions for domain entities
"""

from sales_agent.boundary.db.models.guideline_model import GuidelineModel, GuidelineStrength
from sales_agent.boundary.db.models.session_model import SessionModel
from sales_agent.boundary.db.models.message_model import MessageModel, MessageRole
from sales_agent.boundary.db.models.guideline_usage_model import GuidelineUsageModel

__all__ = [
    "GuidelineModel",
    "GuidelineStrength",
    "SessionModel",
    "MessageModel",
    "MessageRole",
    "GuidelineUsageModel",
]
