"""
Rolling session summarizer.

Produces a short summary of recent turns with one model call. Model
failures never propagate: the summarizer falls back to a deterministic
description of the transcript and reports which path produced the text.

Dependencies: sales_agent.core.llm
System role: Conversation summary refresh at the end of a turn
"""

import logging
from collections.abc import Sequence

from sales_agent.core.agentic_system.shared.conversation_schema import (
    ChatTurn,
    SummaryResult,
)
from sales_agent.core.exceptions import SummaryGenerationFailed
from sales_agent.core.llm.base import ChatMessage, LLMDriver

logger = logging.getLogger(__name__)

EMPTY_SUMMARY = "New conversation started"
SUMMARY_INSTRUCTION = "Generate a concise 2-3 sentence summary of this conversation."
PREVIEW_LENGTH = 50


def build_summary_prompt(
    recent_messages: Sequence[ChatTurn],
    existing_summary: str | None = None,
) -> str:
    """
    Build the summarization system prompt.

    Args:
        recent_messages: Transcript to summarize, oldest first
        existing_summary: Previous rolling summary, if any

    Returns:
        str: System prompt with a numbered transcript
    """
    prompt = (
        "You are a conversation summarizer. "
        "Generate a concise 2-3 sentence summary of the conversation.\n\n"
    )
    if existing_summary:
        prompt += f"Previous summary: {existing_summary}\n\n"

    prompt += "Recent messages:\n"
    for index, message in enumerate(recent_messages, start=1):
        prompt += f"{index}. {message.role}: {message.content}\n"

    prompt += (
        "\nGenerate a new summary that captures the key points "
        "and current state of the conversation."
    )
    return prompt


def build_fallback_summary(recent_messages: Sequence[ChatTurn]) -> str:
    """Deterministic summary naming the message count and last message."""
    if not recent_messages:
        return EMPTY_SUMMARY

    last = recent_messages[-1]
    preview = last.content[:PREVIEW_LENGTH]
    if len(last.content) > PREVIEW_LENGTH:
        preview += "..."
    return (
        f"Conversation with {len(recent_messages)} messages. "
        f'Last message: {last.role} said "{preview}"'
    )


class SessionSummarizer:
    """Generates rolling session summaries through an LLM driver."""

    def __init__(self, llm_driver: LLMDriver) -> None:
        """
        Initialize summarizer.

        Args:
            llm_driver: Chat-capable model driver
        """
        self.llm_driver = llm_driver

    async def summarize(
        self,
        recent_messages: Sequence[ChatTurn],
        existing_summary: str | None = None,
    ) -> SummaryResult:
        """
        Summarize recent turns.

        Args:
            recent_messages: Transcript to summarize, oldest first
            existing_summary: Previous rolling summary, if any

        Returns:
            SummaryResult: Summary with source "model", "fallback" or "empty"
        """
        if not recent_messages:
            return SummaryResult(summary=EMPTY_SUMMARY, source="empty")

        try:
            summary = await self._generate_with_model(recent_messages, existing_summary)
        except SummaryGenerationFailed as e:
            logger.warning(f"Error generating summary, using fallback: {e}")
            return SummaryResult(
                summary=build_fallback_summary(recent_messages),
                source="fallback",
            )

        return SummaryResult(summary=summary, source="model")

    async def generate_summary(
        self,
        recent_messages: Sequence[ChatTurn],
        existing_summary: str | None = None,
    ) -> str:
        """Summary text only; see summarize()."""
        result = await self.summarize(recent_messages, existing_summary)
        return result.summary

    async def _generate_with_model(
        self,
        recent_messages: Sequence[ChatTurn],
        existing_summary: str | None,
    ) -> str:
        system = build_summary_prompt(recent_messages, existing_summary)
        try:
            response = await self.llm_driver.chat(
                system=system,
                messages=[ChatMessage(role="user", content=SUMMARY_INSTRUCTION)],
            )
        except Exception as e:
            raise SummaryGenerationFailed(
                f"Summary model call failed: {type(e).__name__}: {e}"
            ) from e

        summary = (response.content or "").strip()
        if not summary:
            raise SummaryGenerationFailed("Summary model call returned no text")
        return summary
