"""
Structured system prompt builder.

A prompt is an ordered list of sections. Each section has an optional
heading and produces its body lines from a PromptContext. Sections are
separated by a blank line. Rendering is pure: the same context always
yields the same text.

Dependencies: sales_agent.core.agentic_system.shared.conversation_schema
System role: Prompt assembly for agent turns
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from sales_agent.core.agentic_system.shared.conversation_schema import (
    GuidelineRef,
    PromptContext,
)

NO_SUMMARY_TEXT = "No previous conversation"


@dataclass(frozen=True)
class PromptSection:
    """One block of a system prompt.

    An empty body still renders the heading, so rule blocks never vanish
    when no guideline was selected.
    """

    name: str
    render: Callable[[PromptContext], list[str]]
    heading: str | None = None

    def to_text(self, context: PromptContext) -> str:
        lines = list(self.render(context))
        if self.heading is not None:
            lines.insert(0, self.heading)
        return "\n".join(lines)


def static_lines(*lines: str) -> Callable[[PromptContext], list[str]]:
    """Section body that ignores the context."""
    return lambda _context: list(lines)


def format_rule(rule: GuidelineRef) -> str:
    return f"• {rule.content} (id:{rule.id})"


def hard_rule_lines(context: PromptContext) -> list[str]:
    return [format_rule(rule) for rule in context.hard]


def soft_rule_lines(context: PromptContext) -> list[str]:
    return [format_rule(rule) for rule in context.soft]


def context_lines(context: PromptContext) -> list[str]:
    return [
        f"- Stage: {context.stage}",
        f"- Session summary: {context.summary or NO_SUMMARY_TEXT}",
    ]


class PromptBuilder:
    """Renders a PromptContext through an ordered list of sections."""

    def __init__(self, sections: Sequence[PromptSection]) -> None:
        """
        Initialize builder.

        Args:
            sections: Sections in output order
        """
        self.sections = tuple(sections)

    def build_prompt(self, context: PromptContext) -> str:
        """
        Build the system prompt.

        Sections are joined by exactly one blank line. A section that renders
        no lines (an empty rule list) emits only its heading, so the heading is
        followed by a single blank line and the next section; no extra empty
        line stands in for the missing rules.

        Args:
            context: Stage, summary and selected guidelines

        Returns:
            str: Rendered prompt
        """
        return "\n\n".join(section.to_text(context) for section in self.sections)
