"""
Sales agent API endpoints.

Routes:
- POST /agent/respond - Run one conversational turn
- GET /agent/respond - Describe the endpoint

Dependencies: sales_agent.core.agentic_system.sales_agent
System role: Turn pipeline HTTP entry point
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sales_agent.api.deps import get_sales_pipeline
from sales_agent.core.agentic_system.sales_agent.sales_agent_schema import (
    AgentRequest,
    AgentResponse,
)
from sales_agent.core.agentic_system.sales_agent.sales_pipeline import SalesAgentPipeline
from sales_agent.core.exceptions import SalesPipelineError
from sales_agent.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agent", tags=["agent"])


@router.post("/respond", response_model=AgentResponse, response_model_by_alias=True)
async def respond(
    request: AgentRequest,
    pipeline: SalesAgentPipeline = Depends(get_sales_pipeline),
):
    """
    Run the sales agent for one user message.

    Args:
        request: AgentRequest with message and optional sessionId
        pipeline: Injected SalesAgentPipeline

    Returns:
        AgentResponse: sessionId, reply, hardGuidelinesUsed, softGuidelinesUsed

    Raises:
        500 JSON body {"error", "details"} when the pipeline fails
    """
    try:
        return await pipeline.execute(request)
    except SalesPipelineError as e:
        log_exception_with_context(
            logger,
            "Agent API error",
            e,
            session_id=request.session_id,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": e.message},
        )


@router.get("/respond")
async def describe_respond() -> dict:
    """Describe the respond endpoint."""
    return {
        "message": "Sales Agent API",
        "endpoint": "/api/v1/agent/respond",
        "method": "POST",
        "body": {
            "message": "string (required)",
            "sessionId": "string (optional)",
        },
    }
