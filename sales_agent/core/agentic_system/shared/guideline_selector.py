"""
Guideline selector.

Chooses a bounded set of guidelines for a turn: active, not yet used in
the session, and triggered by the user message. Hard and soft rules are
selected independently and keep the store's priority ordering.

Dependencies: sales_agent.application.adapters.sales_store
System role: Deterministic rule selection for an agent turn
"""

import logging
from uuid import UUID

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.boundary.db.models import GuidelineModel, GuidelineStrength
from sales_agent.core.agentic_system.shared.conversation_schema import GuidelineSelection
from sales_agent.core.exceptions import GuidelineSelectionFailed

logger = logging.getLogger(__name__)


def evaluate_triggers(guideline: GuidelineModel, message: str) -> bool:
    """
    Check whether a guideline applies to a message.

    A guideline without triggers always applies. Otherwise any trigger
    contained in the message (case-insensitive) makes it apply.

    Args:
        guideline: Guideline with a triggers list
        message: User message

    Returns:
        bool: True if the guideline is eligible for the message
    """
    triggers = guideline.triggers or []
    if not triggers:
        return True
    lowered = message.lower()
    return any(trigger.lower() in lowered for trigger in triggers)


class GuidelineSelector:
    """Selects unused, triggered guidelines from the sales store."""

    def __init__(self, store: SalesStore) -> None:
        self.store = store

    async def select_applicable(
        self,
        session_id: UUID,
        message: str,
        hard_count: int = 2,
        soft_count: int = 2,
    ) -> GuidelineSelection:
        """
        Select guidelines for the current turn.

        Never pads and never fails on an empty result.

        Args:
            session_id: Session whose usage history excludes guidelines
            message: User message matched against triggers
            hard_count: Maximum hard guidelines
            soft_count: Maximum soft guidelines

        Returns:
            GuidelineSelection: Selected hard and soft guidelines in store order

        Raises:
            GuidelineSelectionFailed: If the store cannot be queried
        """
        try:
            hard_candidates = await self.store.get_unused_guidelines(
                session_id, GuidelineStrength.HARD
            )
            soft_candidates = await self.store.get_unused_guidelines(
                session_id, GuidelineStrength.SOFT
            )
        except Exception as e:
            logger.error(f"Error getting applicable guidelines: {type(e).__name__}: {e}")
            raise GuidelineSelectionFailed(session_id=str(session_id)) from e

        hard = [g for g in hard_candidates if evaluate_triggers(g, message)][:hard_count]
        soft = [g for g in soft_candidates if evaluate_triggers(g, message)][:soft_count]

        logger.debug(
            f"Selected guidelines: hard={len(hard)}/{len(hard_candidates)}, "
            f"soft={len(soft)}/{len(soft_candidates)}"
        )
        return GuidelineSelection(hard=hard, soft=soft)
