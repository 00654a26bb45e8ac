"""
Guideline service orchestrator.

Read-only access to the rule store for the HTTP layer.

Dependencies: sales_agent.application.adapters.sales_store
System role: Guideline query use cases
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.application.adapters.sales_store import SalesStore
from sales_agent.boundary.db.models import GuidelineModel, GuidelineStrength


def guideline_to_dict(guideline: GuidelineModel) -> dict:
    """Plain dict view of a guideline row."""
    return {
        "id": guideline.id,
        "title": guideline.title,
        "content": guideline.content,
        "strength": GuidelineStrength(guideline.strength).value,
        "priority": guideline.priority,
        "triggers": list(guideline.triggers or []),
        "active": guideline.active,
        "single_use": guideline.single_use,
        "created_at": guideline.created_at,
        "updated_at": guideline.updated_at,
    }


class GuidelineService:
    """Guideline service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize guideline service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.store = SalesStore(db)

    async def list_guidelines(self) -> list[dict]:
        """All guidelines, highest priority first."""
        guidelines = await self.store.list_guidelines()
        return [guideline_to_dict(g) for g in guidelines]

    async def get_guideline(self, guideline_id: UUID) -> dict:
        """
        Get guideline by ID.

        Args:
            guideline_id: Guideline UUID

        Returns:
            dict: Guideline data

        Raises:
            ValueError: If guideline not found
        """
        guideline = await self.store.get_guideline(guideline_id)
        if not guideline:
            raise ValueError(f"Guideline {guideline_id} does not exist")
        return guideline_to_dict(guideline)

    async def search_guidelines(
        self,
        strength: str | None = None,
        priority_min: int | None = None,
        priority_max: int | None = None,
        triggers: list[str] | None = None,
        active: bool | None = None,
        single_use: bool | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """
        Search guidelines with composable filters.

        Args:
            strength: "hard" or "soft"
            priority_min: Inclusive lower bound
            priority_max: Inclusive upper bound
            triggers: Keep guidelines sharing any of these triggers
            active: Exact active flag
            single_use: Exact single_use flag
            limit: Maximum number of results

        Returns:
            list[dict]: Matching guidelines, highest priority first

        Raises:
            ValueError: If strength is not "hard" or "soft"
        """
        guidelines = await self.store.search_guidelines(
            strength=GuidelineStrength(strength) if strength else None,
            priority_min=priority_min,
            priority_max=priority_max,
            triggers=triggers,
            active=active,
            single_use=single_use,
            limit=limit,
        )
        return [guideline_to_dict(g) for g in guidelines]
