"""
Test suite for the prompt builder and sales prompt.

System role: Verification of structured system prompt assembly and stage classification
"""

import pytest

from sales_agent.core.agentic_system.sales_agent.sales_prompt import (
    get_sales_prompt_builder,
    get_stage_description,
)
from sales_agent.core.agentic_system.shared.conversation_schema import (
    GuidelineRef,
    PromptContext,
)
from sales_agent.core.agentic_system.shared.prompt_builder import (
    PromptBuilder,
    PromptSection,
    static_lines,
)


@pytest.fixture
def prompt_context() -> PromptContext:
    """Provide prompt context with one rule of each strength."""
    return PromptContext(
        stage="Price inquiry stage",
        summary="The customer asked about pricing.",
        hard=[GuidelineRef(id="g-1", content="Never quote a price")],
        soft=[GuidelineRef(id="g-2", content="Be friendly")],
    )


class TestSalesPrompt:
    """Test suite for the sales prompt sections."""

    def test_build_prompt_should_render_context_block(self, prompt_context) -> None:
        """Test stage and summary appear in the CONTEXT block."""
        prompt = get_sales_prompt_builder().build_prompt(prompt_context)

        assert "CONTEXT\n- Stage: Price inquiry stage\n" in prompt
        assert "- Session summary: The customer asked about pricing." in prompt

    def test_build_prompt_should_render_rules_with_ids(self, prompt_context) -> None:
        """Test each rule renders as a bullet with its id."""
        prompt = get_sales_prompt_builder().build_prompt(prompt_context)

        assert "HARD RULES (must follow):\n• Never quote a price (id:g-1)" in prompt
        assert "SOFT TACTICS (try to follow):\n• Be friendly (id:g-2)" in prompt

    def test_build_prompt_should_use_placeholder_without_summary(self) -> None:
        """Test a missing summary renders the no-conversation placeholder."""
        prompt = get_sales_prompt_builder().build_prompt(PromptContext(stage="Initial conversation stage"))

        assert "- Session summary: No previous conversation" in prompt

    def test_build_prompt_should_keep_headings_for_empty_rule_lists(self) -> None:
        """Test empty rule lists keep their headings with zero rule lines."""
        prompt = get_sales_prompt_builder().build_prompt(PromptContext(stage="Initial conversation stage"))

        assert "HARD RULES (must follow):\n\nSOFT TACTICS (try to follow):\n\nSTYLE:" in prompt
        assert "•" not in prompt

    def test_build_prompt_should_preserve_rule_order(self) -> None:
        """Test rules render in the order supplied."""
        context = PromptContext(
            stage="s",
            hard=[GuidelineRef(id="b", content="second"), GuidelineRef(id="a", content="first")],
        )

        prompt = get_sales_prompt_builder().build_prompt(context)

        assert prompt.index("(id:b)") < prompt.index("(id:a)")

    def test_build_prompt_should_be_deterministic(self, prompt_context) -> None:
        """Test identical input renders byte-identical output."""
        first = get_sales_prompt_builder().build_prompt(prompt_context)
        second = get_sales_prompt_builder().build_prompt(prompt_context.model_copy(deep=True))

        assert first == second

    def test_build_prompt_should_start_with_preamble_and_end_with_closing(self, prompt_context) -> None:
        """Test section order: preamble first, price closing line last."""
        prompt = get_sales_prompt_builder().build_prompt(prompt_context)

        assert prompt.startswith("You are Uptail's Sales Agent.")
        assert prompt.endswith("then move forward to the next step.")


class TestPromptBuilder:
    """Test suite for the generic PromptBuilder."""

    def test_build_prompt_should_join_sections_with_blank_line(self) -> None:
        """Test sections are separated by one blank line."""
        builder = PromptBuilder([
            PromptSection(name="a", render=static_lines("one")),
            PromptSection(name="b", heading="B:", render=static_lines("two", "three")),
        ])

        assert builder.build_prompt(PromptContext(stage="x")) == "one\n\nB:\ntwo\nthree"

    def test_build_prompt_should_render_empty_section_as_heading_only(self) -> None:
        """Test an empty section is its heading followed by a single blank line."""
        builder = PromptBuilder([
            PromptSection(name="rules", heading="RULES:", render=static_lines()),
            PromptSection(name="end", render=static_lines("done")),
        ])

        assert builder.build_prompt(PromptContext(stage="x")) == "RULES:\n\ndone"


class TestGetStageDescription:
    """Test suite for get_stage_description()."""

    @pytest.mark.parametrize(
        "message,expected",
        [
            ("What does it cost?", "Price inquiry stage"),
            ("HOW MUCH is it", "Price inquiry stage"),
            ("Can you integrate with Slack?", "Feature inquiry stage"),
            ("I'm looking for a solution", "Qualification stage"),
            ("Sounds good, let's schedule", "Meeting booking stage"),
            ("hello", "Initial conversation stage"),
        ],
    )
    def test_get_stage_description_should_classify_by_keyword(self, message, expected) -> None:
        """Test keyword groups map to their stage labels."""
        assert get_stage_description(message) == expected

    def test_get_stage_description_should_prefer_earlier_stage(self) -> None:
        """Test price keywords win over later groups in the same message."""
        assert get_stage_description("yes, what is the price?") == "Price inquiry stage"
