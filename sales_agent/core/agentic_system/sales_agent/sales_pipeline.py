"""
Sales agent turn pipeline.

Runs one conversational turn end to end: resolve the session, persist the
user message, gather context, select guidelines, build the system prompt,
call the model, persist the reply and its guideline usage, and refresh
the rolling summary. Every write is committed as soon as it happens; a
failure aborts the turn without rolling back earlier writes and surfaces
as a single SalesPipelineError.

Dependencies: sales_agent.application.adapters.sales_store, sales_agent.core.llm
System role: Turn orchestration for the sales agent
"""

import logging
from uuid import UUID

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.boundary.db.models import MessageRole
from sales_agent.configs.agent import AgentSettings
from sales_agent.core.agentic_system.sales_agent.sales_agent_schema import (
    AgentRequest,
    AgentResponse,
)
from sales_agent.core.agentic_system.sales_agent.sales_prompt import (
    get_sales_prompt_builder,
    get_stage_description,
)
from sales_agent.core.agentic_system.shared.context_gatherer import ContextGatherer
from sales_agent.core.agentic_system.shared.conversation_schema import (
    ChatTurn,
    GuidelineRef,
    PromptContext,
)
from sales_agent.core.agentic_system.shared.guideline_selector import GuidelineSelector
from sales_agent.core.agentic_system.shared.prompt_builder import PromptBuilder
from sales_agent.core.agentic_system.shared.summarizer import SessionSummarizer
from sales_agent.core.exceptions import SalesPipelineError
from sales_agent.core.llm.base import ChatMessage, LLMDriver
from sales_agent.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def parse_session_id(raw: str | None) -> UUID | None:
    """UUID from a client-supplied session id, None when absent or malformed."""
    if not raw:
        return None
    try:
        return UUID(str(raw))
    except ValueError:
        return None


class SalesAgentPipeline:
    """
    Sales agent turn orchestrator.

    Components share one SalesStore, so the whole turn runs on a single
    request-scoped database session.
    """

    def __init__(
        self,
        store: SalesStore,
        llm_driver: LLMDriver,
        settings: AgentSettings | None = None,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            store: Persistence port for this request
            llm_driver: Process-wide model driver
            settings: Guideline counts and message windows
            prompt_builder: System prompt builder (sales sections by default)
        """
        self.store = store
        self.llm_driver = llm_driver
        self.settings = settings or AgentSettings()
        self.prompt_builder = prompt_builder or get_sales_prompt_builder()
        self.context_gatherer = ContextGatherer(store, window=self.settings.context_window)
        self.guideline_selector = GuidelineSelector(store)
        self.summarizer = SessionSummarizer(llm_driver)

    async def execute(self, request: AgentRequest) -> AgentResponse:
        """
        Execute one turn.

        Args:
            request: Session id (optional) and user message

        Returns:
            AgentResponse: Reply and IDs of the guidelines applied

        Raises:
            SalesPipelineError: Any failure, with the original error as __cause__
        """
        try:
            return await self._run(request)
        except Exception as e:
            logger.error(f"{__name__}:execute - FAILED: {type(e).__name__}: {e}")
            raise SalesPipelineError(getattr(e, "message", None) or str(e)) from e

    async def _run(self, request: AgentRequest) -> AgentResponse:
        logger.info(f"{__name__}:execute - Step 1: Resolving session")
        session_id = await self._ensure_session(request.session_id)
        logger.info(f"{__name__}:execute - Step 1 OK: session_id={session_id}")

        logger.info(f"{__name__}:execute - Step 2: Persisting user message")
        await self.store.add_message(session_id, MessageRole.USER, request.message)
        await self.store.commit()

        logger.info(f"{__name__}:execute - Step 3: Gathering context")
        context = await self.context_gatherer.gather_context(session_id, request.message)
        logger.info(
            f"{__name__}:execute - Step 3 OK: recent={len(context.recent_messages)}, "
            f"has_summary={context.session_summary is not None}"
        )

        logger.info(f"{__name__}:execute - Step 4: Selecting guidelines")
        selection = await self.guideline_selector.select_applicable(
            session_id,
            request.message,
            hard_count=self.settings.hard_count,
            soft_count=self.settings.soft_count,
        )
        logger.info(
            f"{__name__}:execute - Step 4 OK: hard={len(selection.hard)}, soft={len(selection.soft)}"
        )

        logger.info(f"{__name__}:execute - Step 5: Building system prompt")
        stage = get_stage_description(request.message)
        system_prompt = self.prompt_builder.build_prompt(
            PromptContext(
                stage=stage,
                summary=context.session_summary,
                hard=[GuidelineRef(id=str(g.id), content=g.content) for g in selection.hard],
                soft=[GuidelineRef(id=str(g.id), content=g.content) for g in selection.soft],
            )
        )
        logger.info(f"{__name__}:execute - Step 5 OK: stage={stage}, prompt_len={len(system_prompt)}")

        logger.info(f"{__name__}:execute - Step 6: Calling model")
        llm_response = await self.llm_driver.chat(
            system=system_prompt,
            messages=[ChatMessage(role="user", content=request.message)],
        )
        logger.info(f"{__name__}:execute - Step 6 OK: reply_len={len(llm_response.content)}")

        logger.info(f"{__name__}:execute - Step 7: Persisting assistant message")
        assistant_message = await self.store.add_message(
            session_id, MessageRole.ASSISTANT, llm_response.content
        )
        await self.store.commit()

        logger.info(f"{__name__}:execute - Step 8: Recording guideline usage")
        hard_used: list[str] = []
        soft_used: list[str] = []
        for guideline in selection.hard:
            await self.store.record_usage(session_id, assistant_message.id, guideline.id)
            hard_used.append(str(guideline.id))
        for guideline in selection.soft:
            await self.store.record_usage(session_id, assistant_message.id, guideline.id)
            soft_used.append(str(guideline.id))
        await self.store.commit()

        logger.info(f"{__name__}:execute - Step 9: Refreshing summary")
        recent = await self.store.get_recent_messages(
            session_id, limit=self.settings.summary_window
        )
        transcript = [
            ChatTurn(role=getattr(m.role, "value", m.role), content=m.content)
            for m in reversed(list(recent))
        ]
        summary = await self.summarizer.summarize(
            transcript, existing_summary=context.session_summary
        )
        await self.store.update_summary(session_id, summary.summary)
        await self.store.commit()
        logger.info(f"{__name__}:execute - Step 9 OK: summary_source={summary.source}")

        log_with_context(
            logger,
            logging.INFO,
            "Sales agent turn completed",
            session_id=session_id,
            hard_guidelines_used=hard_used,
            soft_guidelines_used=soft_used,
        )

        return AgentResponse(
            session_id=str(session_id),
            reply=llm_response.content,
            hard_guidelines_used=hard_used,
            soft_guidelines_used=soft_used,
        )

    async def _ensure_session(self, raw_session_id: str | None) -> UUID:
        session_id = parse_session_id(raw_session_id)
        if session_id is not None:
            existing = await self.store.get_session(session_id)
            if existing is not None:
                return existing.id
            logger.info(f"Session {raw_session_id} not found, creating a new one")

        session = await self.store.create_session()
        await self.store.commit()
        return session.id
