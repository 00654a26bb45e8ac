"""
Test suite for SessionSummarizer.

Covers the empty, model and fallback paths and the summarization prompt.

System role: Verification of rolling summary generation
"""

import pytest

from sales_agent.core.agentic_system.shared.conversation_schema import ChatTurn
from sales_agent.core.agentic_system.shared.summarizer import (
    SUMMARY_INSTRUCTION,
    SessionSummarizer,
    build_fallback_summary,
    build_summary_prompt,
)


@pytest.fixture
def transcript() -> list[ChatTurn]:
    """Provide a two-message transcript, oldest first."""
    return [
        ChatTurn(role="user", content="¿Cuánto cuesta?"),
        ChatTurn(role="assistant", content="Prefiero agendar una llamada."),
    ]


class TestSummarize:
    """Test suite for SessionSummarizer.summarize()."""

    @pytest.mark.asyncio
    async def test_summarize_should_not_call_model_for_empty_transcript(self, fake_llm_driver) -> None:
        """Test empty input returns the literal new-conversation summary."""
        summarizer = SessionSummarizer(fake_llm_driver)

        result = await summarizer.summarize([])

        assert result.summary == "New conversation started"
        assert result.source == "empty"
        assert fake_llm_driver.calls == []

    @pytest.mark.asyncio
    async def test_summarize_should_return_trimmed_model_text(self, fake_llm_driver, transcript) -> None:
        """Test the model path strips surrounding whitespace."""
        # Arrange
        fake_llm_driver.queue.append("  Customer asked about price.  \n")
        summarizer = SessionSummarizer(fake_llm_driver)

        # Act
        result = await summarizer.summarize(transcript, existing_summary="Earlier chat")

        # Assert
        assert result.summary == "Customer asked about price."
        assert result.source == "model"

    @pytest.mark.asyncio
    async def test_summarize_should_send_single_user_instruction(self, fake_llm_driver, transcript) -> None:
        """Test one model call with the transcript in the system prompt."""
        summarizer = SessionSummarizer(fake_llm_driver)

        await summarizer.summarize(transcript)

        assert len(fake_llm_driver.calls) == 1
        call = fake_llm_driver.calls[0]
        assert "1. user: ¿Cuánto cuesta?" in call["system"]
        assert [(m.role, m.content) for m in call["messages"]] == [("user", SUMMARY_INSTRUCTION)]

    @pytest.mark.asyncio
    async def test_summarize_should_fall_back_on_model_failure(self, failing_llm_driver) -> None:
        """Test a failed model call yields the truncated deterministic summary."""
        # Arrange
        summarizer = SessionSummarizer(failing_llm_driver)

        # Act
        result = await summarizer.summarize([ChatTurn(role="user", content="A" * 60)])

        # Assert
        assert result.source == "fallback"
        assert "1 messages" in result.summary
        assert f'said "{"A" * 50}..."' in result.summary

    @pytest.mark.asyncio
    async def test_summarize_should_fall_back_on_blank_model_text(self, fake_llm_driver, transcript) -> None:
        """Test whitespace-only model output is treated as a failure."""
        fake_llm_driver.queue.append("   ")
        summarizer = SessionSummarizer(fake_llm_driver)

        result = await summarizer.summarize(transcript)

        assert result.source == "fallback"

    @pytest.mark.asyncio
    async def test_generate_summary_should_return_text_only(self, failing_llm_driver, transcript) -> None:
        """Test generate_summary returns the summary string and never raises."""
        summarizer = SessionSummarizer(failing_llm_driver)

        summary = await summarizer.generate_summary(transcript)

        assert summary == (
            'Conversation with 2 messages. Last message: assistant said '
            '"Prefiero agendar una llamada."'
        )


class TestSummaryHelpers:
    """Test suite for prompt and fallback builders."""

    def test_build_summary_prompt_should_include_previous_summary(self, transcript) -> None:
        """Test the existing summary precedes the numbered transcript."""
        prompt = build_summary_prompt(transcript, "They said hi.")

        assert prompt.startswith("You are a conversation summarizer.")
        assert "Previous summary: They said hi.\n\nRecent messages:\n1. user:" in prompt
        assert "2. assistant: Prefiero agendar una llamada.\n" in prompt
        assert prompt.endswith("current state of the conversation.")

    def test_build_summary_prompt_should_omit_missing_summary(self, transcript) -> None:
        """Test no Previous summary line without an existing summary."""
        assert "Previous summary" not in build_summary_prompt(transcript)

    def test_build_fallback_summary_should_not_truncate_short_content(self) -> None:
        """Test content of 50 characters or fewer has no ellipsis."""
        summary = build_fallback_summary([ChatTurn(role="user", content="B" * 50)])

        assert summary.endswith(f'"{"B" * 50}"')
