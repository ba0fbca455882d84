"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class User:
    """Domain entity for an application user (owned by the identity provider)."""

    email: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
