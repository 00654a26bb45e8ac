"""
Message API endpoints.

Routes: GET /messages/{message_id}/guideline-usage

Dependencies: sales_agent.application.services.conversation_service
System role: Per-message usage ledger HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from sales_agent.api.deps import get_conversation_service
from sales_agent.application.services.conversation_service import ConversationService
from sales_agent.models.common import SuccessResponse
from sales_agent.models.message import GuidelineUsageResponse

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "/{message_id}/guideline-usage",
    response_model=SuccessResponse[list[GuidelineUsageResponse]],
)
async def get_message_guideline_usage(
    message_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SuccessResponse[list[GuidelineUsageResponse]]:
    """Guidelines applied to one assistant message."""
    try:
        usages = await conversation_service.get_message_usage(message_id)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve guideline usage: {str(e)}",
        )

    data = [GuidelineUsageResponse(**u) for u in usages]
    return SuccessResponse(
        data=data,
        count=len(data),
        message="Message guideline usage retrieved successfully",
    )
