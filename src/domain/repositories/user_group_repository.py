"""User group repository protocol."""

from collections.abc import AsyncIterator
from typing import Protocol
from uuid import UUID

from domain.entities.user_group import UserGroup
from domain.repositories.base_repository import ICrudRepository


class IUserGroupRepository(ICrudRepository[UserGroup], Protocol):
    """Repository interface for UserGroup entities."""

    def find_by_default_workspace_id(
        self, workspace_id: UUID
    ) -> AsyncIterator[UserGroup]:
        """Stream the user groups whose default workspace is ``workspace_id``."""
        ...
