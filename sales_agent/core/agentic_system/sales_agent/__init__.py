"""Sales agent: prompt, schemas and turn pipeline."""

from sales_agent.core.agentic_system.sales_agent.sales_agent_schema import (
    AgentRequest,
    AgentResponse,
)
from sales_agent.core.agentic_system.sales_agent.sales_pipeline import SalesAgentPipeline
from sales_agent.core.agentic_system.sales_agent.sales_prompt import get_stage_description

__all__ = [
    "AgentRequest",
    "AgentResponse",
    "SalesAgentPipeline",
    "get_stage_description",
]
