"""
Session API endpoints.

Routes:
- POST /sessions - Create new session
- GET /sessions - List all sessions (?stats=true for statistics)
- DELETE /sessions/{id} - Delete session and its transcript
- POST /sessions/bulk-delete - Delete several sessions
- GET /sessions/{id}/messages - Get transcript
- POST /sessions/{id}/messages - Append a message
- GET /sessions/{id}/guideline-usage - Get usage ledger
- GET /sessions/{id}/guideline-usage/{usage_id} - Get one usage record

Dependencies: sales_agent.application.services, sales_agent.models
System role: Session management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from sales_agent.api.deps import get_conversation_service, get_session_service
from sales_agent.application.services.conversation_service import ConversationService
from sales_agent.application.services.session_service import SessionService
from sales_agent.models.common import SuccessResponse
from sales_agent.models.message import (
    CreateMessageRequest,
    GuidelineUsageResponse,
    MessageResponse,
)
from sales_agent.models.session import (
    BulkDeleteRequest,
    BulkDeleteResult,
    SessionListItem,
    SessionResponse,
    SessionStatistics,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SuccessResponse[SessionResponse], status_code=201)
async def create_session(
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[SessionResponse]:
    """
    Create a new empty session.

    Raises:
        HTTPException(500): Creation failed
    """
    try:
        session_data = await session_service.create_session()
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Session creation failed: {str(e)}",
        )
    return SuccessResponse(
        data=SessionResponse(**session_data),
        message="Session created successfully",
    )


@router.get(
    "",
    response_model=SuccessResponse[list[SessionListItem]] | SuccessResponse[SessionStatistics],
)
async def list_sessions(
    stats: bool = False,
    limit: int | None = None,
    offset: int = 0,
    session_service: SessionService = Depends(get_session_service),
):
    """
    List sessions newest first, or aggregate statistics when stats=true.

    Args:
        stats: Return statistics instead of the session list
        limit: Maximum number of sessions
        offset: Number to skip (default 0)
        session_service: Injected SessionService

    Raises:
        HTTPException(500): Retrieval failed
    """
    try:
        if stats:
            statistics = await session_service.get_statistics()
            return SuccessResponse[SessionStatistics](
                data=SessionStatistics(**statistics),
                message="Session statistics retrieved successfully",
            )

        sessions = await session_service.get_all_sessions(limit=limit, offset=offset)
    except Exception as e:
        logger.error(f"Error fetching sessions: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve sessions: {str(e)}",
        )

    data = [SessionListItem(**s) for s in sessions]
    return SuccessResponse[list[SessionListItem]](
        data=data,
        count=len(data),
        message="All sessions retrieved successfully",
    )


@router.post("/bulk-delete", response_model=SuccessResponse[BulkDeleteResult])
async def bulk_delete_sessions(
    request: BulkDeleteRequest,
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[BulkDeleteResult]:
    """
    Delete several sessions with their messages and usage records.

    Raises:
        HTTPException(500): Deletion failed
    """
    try:
        count = await session_service.delete_sessions(request.ids)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Bulk session deletion failed: {str(e)}",
        )
    return SuccessResponse(
        data=BulkDeleteResult(count=count),
        message=(
            f"Successfully deleted {count} sessions with all related "
            "messages and guideline usages"
        ),
    )


@router.delete("/{session_id}", response_model=SuccessResponse[dict])
async def delete_session(
    session_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[dict]:
    """
    Delete session by ID.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Deletion failed
    """
    try:
        await session_service.delete_session(session_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Session deletion failed: {str(e)}",
        )
    return SuccessResponse(
        data={"id": str(session_id)},
        message="Session deleted successfully with all related messages and guideline usages",
    )


@router.get("/{session_id}/messages", response_model=SuccessResponse[list[MessageResponse]])
async def get_messages(
    session_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SuccessResponse[list[MessageResponse]]:
    """
    Get a session's transcript, oldest first.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Retrieval failed
    """
    try:
        messages = await conversation_service.get_messages(session_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve messages: {str(e)}",
        )

    data = [MessageResponse(**m) for m in messages]
    return SuccessResponse(
        data=data,
        count=len(data),
        message="Messages retrieved successfully",
    )


@router.post(
    "/{session_id}/messages",
    response_model=SuccessResponse[MessageResponse],
    status_code=201,
)
async def create_message(
    session_id: UUID,
    request: CreateMessageRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SuccessResponse[MessageResponse]:
    """
    Append a message to a session.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Creation failed
    """
    try:
        message = await conversation_service.add_message(
            session_id, request.role, request.content
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Message creation failed: {str(e)}",
        )
    return SuccessResponse(
        data=MessageResponse(**message),
        message="Message created successfully",
    )


@router.get(
    "/{session_id}/guideline-usage",
    response_model=SuccessResponse[list[GuidelineUsageResponse]],
)
async def get_session_guideline_usage(
    session_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SuccessResponse[list[GuidelineUsageResponse]]:
    """
    Get the guidelines applied in a session, most recent first.

    Raises:
        HTTPException(404): Session not found
    """
    try:
        usages = await conversation_service.get_session_usage(session_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    data = [GuidelineUsageResponse(**u) for u in usages]
    return SuccessResponse(
        data=data,
        count=len(data),
        message="Guideline usage retrieved successfully",
    )


@router.get(
    "/{session_id}/guideline-usage/{usage_id}",
    response_model=SuccessResponse[GuidelineUsageResponse],
)
async def get_session_guideline_usage_detail(
    session_id: UUID,
    usage_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SuccessResponse[GuidelineUsageResponse]:
    """
    Get one usage record of a session with its guideline and message.

    Raises:
        HTTPException(404): Usage record not found in this session
    """
    try:
        usage = await conversation_service.get_session_usage_detail(session_id, usage_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SuccessResponse(
        data=GuidelineUsageResponse(**usage),
        message="Guideline usage details retrieved successfully",
    )
