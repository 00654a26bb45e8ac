"""API request/response schemas."""

from sales_agent.models.common import SuccessResponse
from sales_agent.models.guideline import GuidelineResponse, GuidelineSearchQuery
from sales_agent.models.message import (
    CreateMessageRequest,
    GuidelineUsageResponse,
    MessageBrief,
    MessageResponse,
)
from sales_agent.models.session import (
    BulkDeleteRequest,
    BulkDeleteResult,
    SessionListItem,
    SessionResponse,
    SessionStatistics,
)

__all__ = [
    "BulkDeleteRequest",
    "BulkDeleteResult",
    "CreateMessageRequest",
    "GuidelineResponse",
    "GuidelineSearchQuery",
    "GuidelineUsageResponse",
    "MessageBrief",
    "MessageResponse",
    "SessionListItem",
    "SessionResponse",
    "SessionStatistics",
    "SuccessResponse",
]
