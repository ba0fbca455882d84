"""User group domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from domain.entities.acl import Policy
from domain.entities.user import User


@dataclass(frozen=True)
class UserInGroup:
    """Membership record wrapping a user inside a group."""

    id: UUID
    username: str
    name: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserInGroup":
        """Build a fresh membership record for ``user``."""
        return cls(id=user.id, username=user.email, name=user.name)


@dataclass(frozen=True)
class UserGroup:
    """Domain entity for a named collection of users.

    ``id`` and ``version`` are owned by the persistence layer: ``id`` is
    ``None`` until the group is created, ``version`` is bumped on each write.
    """

    name: str
    id: UUID | None = None
    description: str | None = None
    default_workspace_id: UUID | None = None
    users: tuple[UserInGroup, ...] = ()
    policies: tuple[Policy, ...] = ()
    version: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
