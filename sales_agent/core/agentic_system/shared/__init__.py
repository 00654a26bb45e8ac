"""Reusable agent components: context, selection, prompting, summarization."""

from sales_agent.core.agentic_system.shared.context_gatherer import ContextGatherer
from sales_agent.core.agentic_system.shared.guideline_selector import (
    GuidelineSelector,
    evaluate_triggers,
)
from sales_agent.core.agentic_system.shared.prompt_builder import PromptBuilder, PromptSection
from sales_agent.core.agentic_system.shared.summarizer import SessionSummarizer

__all__ = [
    "ContextGatherer",
    "GuidelineSelector",
    "PromptBuilder",
    "PromptSection",
    "SessionSummarizer",
    "evaluate_triggers",
]
