"""Service orchestrators."""

from .conversation_service import ConversationService
from .guideline_service import GuidelineService
from .session_service import SessionService

__all__ = [
    "ConversationService",
    "GuidelineService",
    "SessionService",
]
