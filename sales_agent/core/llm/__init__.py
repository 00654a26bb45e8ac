"""
Language model drivers.

Exports the LLMDriver interface, its message/response schemas and the
provider factory.
"""

from sales_agent.core.llm.base import ChatMessage, LLMDriver, LLMResponse
from sales_agent.core.llm.factory import create_llm_driver, get_provider_name

__all__ = [
    "ChatMessage",
    "LLMDriver",
    "LLMResponse",
    "create_llm_driver",
    "get_provider_name",
]
