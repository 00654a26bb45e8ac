"""
Guideline API endpoints.

Routes:
- GET /guidelines - List all guidelines
- GET /guidelines/search - Filter guidelines
- GET /guidelines/{id} - Get one guideline

Dependencies: sales_agent.application.services.guideline_service, sales_agent.models
System role: Rule store HTTP API
"""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from sales_agent.api.deps import get_guideline_service
from sales_agent.application.services.guideline_service import GuidelineService
from sales_agent.models.common import SuccessResponse
from sales_agent.models.guideline import GuidelineResponse, GuidelineSearchQuery

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/guidelines", tags=["guidelines"])


class GuidelineSearchResponse(SuccessResponse[list[GuidelineResponse]]):
    query: GuidelineSearchQuery


@router.get("", response_model=SuccessResponse[list[GuidelineResponse]])
async def list_guidelines(
    guideline_service: GuidelineService = Depends(get_guideline_service),
) -> SuccessResponse[list[GuidelineResponse]]:
    """
    List all guidelines, highest priority first.

    Raises:
        HTTPException(500): Retrieval failed
    """
    try:
        guidelines = await guideline_service.list_guidelines()
    except Exception as e:
        logger.error(f"Error fetching guidelines: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve guidelines: {str(e)}",
        )

    data = [GuidelineResponse(**g) for g in guidelines]
    return SuccessResponse(
        data=data,
        count=len(data),
        message="Guidelines retrieved successfully",
    )


@router.get("/search", response_model=GuidelineSearchResponse)
async def search_guidelines(
    strength: Literal["hard", "soft"] | None = None,
    priority_min: int | None = None,
    priority_max: int | None = None,
    triggers: str | None = Query(default=None, description="Comma-separated triggers"),
    active: bool | None = None,
    single_use: bool | None = None,
    limit: int | None = Query(default=None, gt=0),
    guideline_service: GuidelineService = Depends(get_guideline_service),
) -> GuidelineSearchResponse:
    """
    Filter guidelines. All filters are optional and compose.

    Args:
        strength: "hard" or "soft"
        priority_min: Inclusive lower priority bound
        priority_max: Inclusive upper priority bound
        triggers: Comma-separated list; any overlap matches
        active: Exact active flag
        single_use: Exact single_use flag
        limit: Maximum number of results
        guideline_service: Injected GuidelineService

    Raises:
        HTTPException(500): Search failed
    """
    trigger_list = [t.strip() for t in triggers.split(",") if t.strip()] if triggers else None
    query = GuidelineSearchQuery(
        strength=strength,
        priority_min=priority_min,
        priority_max=priority_max,
        triggers=trigger_list,
        active=active,
        single_use=single_use,
        limit=limit,
    )

    try:
        guidelines = await guideline_service.search_guidelines(**query.model_dump())
    except Exception as e:
        logger.error(f"Error searching guidelines: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Guideline search failed: {str(e)}",
        )

    data = [GuidelineResponse(**g) for g in guidelines]
    return GuidelineSearchResponse(
        data=data,
        count=len(data),
        query=query,
        message="Guidelines filtered successfully",
    )


@router.get("/{guideline_id}", response_model=SuccessResponse[GuidelineResponse])
async def get_guideline(
    guideline_id: UUID,
    guideline_service: GuidelineService = Depends(get_guideline_service),
) -> SuccessResponse[GuidelineResponse]:
    """
    Get guideline by ID.

    Raises:
        HTTPException(404): Guideline not found
    """
    try:
        guideline = await guideline_service.get_guideline(guideline_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SuccessResponse(
        data=GuidelineResponse(**guideline),
        message="Guideline retrieved successfully",
    )
