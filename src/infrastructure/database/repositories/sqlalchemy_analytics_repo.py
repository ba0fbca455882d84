"""SQLAlchemy implementation of Analytics Event repository."""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.analytics import AnalyticsEvent, AnalyticsEvents
from infrastructure.database.models import AnalyticsEventModel


class SQLAlchemyAnalyticsRepository:
    """SQLAlchemy implementation of IAnalyticsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, event: AnalyticsEvent) -> AnalyticsEvent:
        """Record a new analytics event."""
        model = self._to_model(event)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get_for_entity(
        self,
        entity_type: str,
        entity_id: UUID,
        limit: int = 50,
    ) -> List[AnalyticsEvent]:
        """Get events recorded for a specific entity, newest first."""
        stmt = (
            select(AnalyticsEventModel)
            .where(
                AnalyticsEventModel.entity_type == entity_type,
                AnalyticsEventModel.entity_id == entity_id,
            )
            .order_by(AnalyticsEventModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: AnalyticsEventModel) -> AnalyticsEvent:
        """Convert ORM model to domain entity."""
        return AnalyticsEvent(
            id=model.id,
            event=AnalyticsEvents(model.event),
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            actor_id=model.actor_id,
            properties=model.properties,
            created_at=model.created_at,
        )

    def _to_model(self, entity: AnalyticsEvent) -> AnalyticsEventModel:
        """Convert domain entity to ORM model."""
        return AnalyticsEventModel(
            id=entity.id,
            event=entity.event.value,
            entity_type=entity.entity_type,
            entity_id=entity.entity_id,
            actor_id=entity.actor_id,
            properties=entity.properties,
            created_at=entity.created_at,
        )
