"""User lookup service."""

from collections.abc import Callable, Sequence
from uuid import UUID

from core.exceptions import UserNotFoundError
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork


class UserService:
    """Read-only access to users owned by the identity provider."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_by_ids(self, ids: Sequence[UUID]) -> list[User]:
        """Resolve users in the order given. Raises on the first unknown ID."""
        async with self._uow_factory() as uow:
            users: list[User] = await uow.users.get_many(ids)

        known = {user.id for user in users}
        for user_id in ids:
            if user_id not in known:
                raise UserNotFoundError(str(user_id))
        return users
