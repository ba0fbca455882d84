"""User repository protocol."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        ...

    async def get_many(self, ids: Sequence[UUID]) -> list[User]:
        """Get the known users among ``ids``, in the order given."""
        ...
