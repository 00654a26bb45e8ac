"""
LangChain-backed driver shared by all providers.

Maps {role, content} messages to LangChain message objects, normalizes
multi-part responses to plain text and converts client exceptions into
ProviderCallError.

Dependencies: langchain_core, sales_agent.core.llm.base
System role: Common chat/embedding plumbing for model drivers
"""

import logging
from typing import Any

from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from sales_agent.core.exceptions import ProviderCallError
from sales_agent.core.llm.base import ChatMessage, LLMDriver, LLMResponse

logger = logging.getLogger(__name__)


def extract_status_code(exc: BaseException) -> int | None:
    """
    Best-effort upstream HTTP status from a client exception.

    Understands exceptions exposing status_code, an integer code
    (google.api_core) or a botocore-style response dict.
    """
    for attr in ("status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(exc, "response", None)
    if isinstance(response, dict):
        status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        if isinstance(status, int):
            return status
    cause = exc.__cause__
    if cause is not None and cause is not exc:
        return extract_status_code(cause)
    return None


def response_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return ""


def to_langchain_messages(
    system: str,
    messages: list[ChatMessage] | list[dict],
) -> list[BaseMessage]:
    """
    Build the LangChain message list: system prompt first, then messages.

    Args:
        system: System prompt
        messages: ChatMessage models or {role, content} dicts

    Returns:
        list[BaseMessage]: SystemMessage followed by mapped messages
    """
    converted: list[BaseMessage] = [SystemMessage(content=system)]
    for raw in messages:
        message = raw if isinstance(raw, ChatMessage) else ChatMessage(**raw)
        if message.role == "user":
            converted.append(HumanMessage(content=message.content))
        elif message.role == "assistant":
            converted.append(AIMessage(content=message.content))
        else:
            converted.append(SystemMessage(content=message.content))
    return converted


class LangChainDriver(LLMDriver):
    """LLMDriver implemented on a LangChain chat model and embeddings pair."""

    def __init__(self, chat_model: BaseChatModel, embeddings: Embeddings) -> None:
        """
        Initialize driver with LangChain components.

        Args:
            chat_model: Configured LangChain chat model
            embeddings: Configured LangChain embeddings model
        """
        self._chat_model = chat_model
        self._embeddings = embeddings

    async def chat(
        self,
        system: str,
        messages: list[ChatMessage] | list[dict],
    ) -> LLMResponse:
        lc_messages = to_langchain_messages(system, messages)
        try:
            result = await self._chat_model.ainvoke(lc_messages)
        except Exception as e:
            status_code = extract_status_code(e)
            logger.error(
                f"{self.provider_name} chat error: {type(e).__name__}: {e}",
                extra={"provider": self.provider_name, "status_code": status_code},
            )
            raise ProviderCallError(
                f"{self.provider_name} chat failed: {e}",
                provider=self.provider_name,
                status_code=status_code,
            ) from e

        content = response_text(getattr(result, "content", None))
        if not content.strip():
            raise ProviderCallError(
                f"No content in {self.provider_name} response",
                provider=self.provider_name,
            )
        return LLMResponse(content=content)

    async def embed(self, text: str) -> list[float]:
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            status_code = extract_status_code(e)
            logger.error(f"{self.provider_name} embedding error: {type(e).__name__}: {e}")
            raise ProviderCallError(
                f"{self.provider_name} embedding failed: {e}",
                provider=self.provider_name,
                status_code=status_code,
            ) from e

        if not vector:
            raise ProviderCallError(
                f"No embedding in {self.provider_name} response",
                provider=self.provider_name,
            )
        return list(vector)
