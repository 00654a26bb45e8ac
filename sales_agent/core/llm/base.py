"""
Language model driver contract.

Every backend exposes the same two capabilities, chat completion and
text embedding, and reports failures with the same error taxonomy
(ProviderConfigError at construction, ProviderCallError per call).

Dependencies: pydantic, sales_agent.core.exceptions
System role: Model driver strategy interface
"""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, Field

ChatRole = Literal["user", "assistant", "system"]


class ChatMessage(BaseModel):
    """One message sent to a chat model."""

    role: ChatRole
    content: str


class LLMResponse(BaseModel):
    """Text produced by a chat completion."""

    content: str = Field(description="Assistant text returned by the model")


class LLMDriver(ABC):
    """
    Strategy interface over a chat/embedding backend.

    Implementations never retry; callers own retry policy.
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def chat(
        self,
        system: str,
        messages: list[ChatMessage] | list[dict],
    ) -> LLMResponse:
        """
        Run one chat completion.

        Args:
            system: System prompt placed before all messages
            messages: Conversation messages ({role, content})

        Returns:
            LLMResponse: Non-empty assistant text

        Raises:
            ProviderCallError: Upstream failure or missing content
        """

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """
        Embed a text.

        Args:
            text: Input text

        Returns:
            list[float]: Embedding vector

        Raises:
            ProviderCallError: Upstream failure or missing vector
        """
