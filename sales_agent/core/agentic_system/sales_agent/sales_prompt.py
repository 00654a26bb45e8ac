"""
Sales agent system prompt.

Defines the sections of the sales agent system prompt and the keyword
classifier that labels the conversation stage of a user message.

Dependencies: sales_agent.core.agentic_system.shared.prompt_builder
System role: Prompt template for sales agent behavior
"""

from sales_agent.core.agentic_system.shared.prompt_builder import (
    PromptBuilder,
    PromptSection,
    context_lines,
    hard_rule_lines,
    soft_rule_lines,
    static_lines,
)

SALES_PROMPT_SECTIONS = (
    PromptSection(
        name="preamble",
        render=static_lines(
            "You are Uptail's Sales Agent. Goal: progress the conversation to a "
            "qualified next step or a booked meeting.",
            "Architecture matters: your outputs must be predictable and modular so "
            "multiple agents can scale independently.",
            "Follow HARD rules strictly. Prefer SOFT tactics when possible. "
            "Stay concise and friendly.",
        ),
    ),
    PromptSection(name="context", heading="CONTEXT", render=context_lines),
    PromptSection(name="hard_rules", heading="HARD RULES (must follow):", render=hard_rule_lines),
    PromptSection(name="soft_tactics", heading="SOFT TACTICS (try to follow):", render=soft_rule_lines),
    PromptSection(
        name="style",
        heading="STYLE:",
        render=static_lines(
            "- Keep messages < 120 words.",
            "- Ask one clear question at a time.",
            "- Never hallucinate unavailable features; offer to check and follow up.",
        ),
    ),
    PromptSection(
        name="closing",
        render=static_lines(
            "If a user asks for price: never quote exact price; book a call with sales. "
            "If uncertainty: ask a clarifying question, then move forward to the next step.",
        ),
    ),
)

# Checked in order; first matching stage wins.
STAGE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Price inquiry stage", ("price", "cost", "how much")),
    ("Feature inquiry stage", ("feature", "capability", "can you")),
    ("Qualification stage", ("interested", "looking for", "need")),
    ("Meeting booking stage", ("yes", "sounds good", "schedule")),
)
DEFAULT_STAGE = "Initial conversation stage"


def get_sales_prompt_builder() -> PromptBuilder:
    """Prompt builder configured with the sales agent sections."""
    return PromptBuilder(SALES_PROMPT_SECTIONS)


def get_stage_description(user_message: str) -> str:
    """
    Classify the conversation stage of a user message by keyword.

    Args:
        user_message: Raw user message

    Returns:
        str: Stage label
    """
    message = user_message.lower()
    for stage, keywords in STAGE_KEYWORDS:
        if any(keyword in message for keyword in keywords):
            return stage
    return DEFAULT_STAGE
