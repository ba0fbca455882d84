"""Analytics service for recording entity lifecycle events."""

from typing import Any
from uuid import UUID

import structlog

from core.context import get_current_principal
from domain.entities.analytics import AnalyticsEvent, AnalyticsEvents
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class AnalyticsService:
    """Service layer for analytics event recording."""

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def send_object_event(
        self,
        uow: IUnitOfWork,
        event: AnalyticsEvents,
        entity_type: str,
        entity_id: UUID,
        properties: dict[str, Any] | None = None,
    ) -> AnalyticsEvent | None:
        """Record an event within an existing UoW transaction.

        Called by other services inside their own transaction context, so
        the event is committed or rolled back together with the change it
        describes.

        Args:
            uow: The active Unit of Work (caller manages commit).
            event: The lifecycle event.
            entity_type: The type of entity affected.
            entity_id: The ID of the entity affected.
            properties: Optional event properties.

        Returns:
            The stored AnalyticsEvent, or None when analytics is disabled.
        """
        if not self._enabled:
            return None

        record = AnalyticsEvent(
            event=event,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_id=get_current_principal(),
            properties=properties,
        )
        stored = await uow.analytics.create(record)

        logger.info(
            "analytics_event",
            analytics_event=event.value,
            entity_type=entity_type,
            entity_id=str(entity_id),
        )
        return stored  # type: ignore[no-any-return]
