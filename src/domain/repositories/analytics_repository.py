"""Analytics event repository protocol."""

from typing import List, Protocol
from uuid import UUID

from domain.entities.analytics import AnalyticsEvent


class IAnalyticsRepository(Protocol):
    """Repository interface for AnalyticsEvent entities."""

    async def create(self, event: AnalyticsEvent) -> AnalyticsEvent:
        """Record a new analytics event."""
        ...

    async def get_for_entity(
        self,
        entity_type: str,
        entity_id: UUID,
        limit: int = 50,
    ) -> List[AnalyticsEvent]:
        """Get events recorded for a specific entity, newest first."""
        ...
