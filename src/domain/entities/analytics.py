"""Analytics event domain entity and event names."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4


class AnalyticsEvents(StrEnum):
    """Lifecycle events recorded by the generic CRUD paths."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass
class AnalyticsEvent:
    """Domain entity for a recorded analytics event."""

    event: AnalyticsEvents
    entity_type: str
    entity_id: UUID
    id: UUID = field(default_factory=uuid4)
    actor_id: UUID | None = None
    properties: dict[str, Any] | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
