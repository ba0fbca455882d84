"""Generic permission-aware CRUD repository protocol."""

from typing import Protocol, TypeVar
from uuid import UUID

from domain.entities.acl import AclPermission

EntityT = TypeVar("EntityT")


class ICrudRepository(Protocol[EntityT]):
    """CRUD operations shared by every permission-aware repository."""

    async def find_by_id(
        self, id: UUID, permission: AclPermission | None = None
    ) -> EntityT | None:
        """Get an entity by ID if it is visible under ``permission``."""
        ...

    async def create(self, entity: EntityT) -> EntityT:
        """Persist a new entity and return it with its assigned ID."""
        ...

    async def update_by_id(
        self, id: UUID, entity: EntityT, permission: AclPermission
    ) -> EntityT:
        """Overwrite an entity. Raises if missing, denied or stale."""
        ...

    async def delete_by_id(self, id: UUID, permission: AclPermission) -> EntityT:
        """Delete an entity and return it. Raises if missing or denied."""
        ...
