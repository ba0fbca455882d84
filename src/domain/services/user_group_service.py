"""User group service layer."""

from collections.abc import AsyncIterator, Callable, Sequence
from dataclasses import replace
from typing import Any, Optional
from uuid import UUID

from core.exceptions import UserGroupNotFoundError
from core.validation import EntityValidator
from domain.constraints import UserGroupRules
from domain.entities.acl import AclPermission
from domain.entities.user import User
from domain.entities.user_group import UserGroup, UserInGroup
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.analytics_service import AnalyticsService
from domain.services.base_service import CrudService
from domain.services.user_service import UserService

ENTITY_TYPE = "UserGroup"


def _describe(group: UserGroup) -> dict[str, Any]:
    return {
        "name": group.name,
        "member_count": len(group.users),
        "default_workspace_id": (
            str(group.default_workspace_id) if group.default_workspace_id else None
        ),
    }


class UserGroupService:
    """Service layer for user groups.

    Permission checks, conflict detection and visibility rules all live in
    the repository; errors it raises reach the caller untouched.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        validator: Optional[EntityValidator[UserGroup]] = None,
        analytics_service: Optional[AnalyticsService] = None,
        user_service: Optional[UserService] = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._users = user_service or UserService(uow_factory)
        self._crud: CrudService[UserGroup] = CrudService(
            uow_factory,
            repository=lambda uow: uow.user_groups,
            entity_type=ENTITY_TYPE,
            validator=validator or EntityValidator(UserGroupRules, ENTITY_TYPE),
            analytics_service=analytics_service,
            describe=_describe,
        )

    async def get_by_id(
        self, id: UUID, permission: AclPermission
    ) -> UserGroup | None:
        """Get a user group if it is visible under ``permission``."""
        return await self._crud.get_by_id(id, permission)

    async def bulk_add_users(
        self, user_group: UserGroup, users: Sequence[User]
    ) -> UserGroup:
        """Append one membership per user and persist the result.

        Members are appended in input order with no deduplication, so
        adding the same user twice yields two entries. ``user_group`` itself
        is left untouched; the stored group is returned.
        """
        updated = replace(
            user_group,
            users=user_group.users + tuple(UserInGroup.from_user(u) for u in users),
        )
        async with self._uow_factory() as uow:
            saved = await uow.user_groups.update_by_id(
                user_group.id, updated, AclPermission.MANAGE_USER_GROUPS
            )
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def get_default_user_groups(
        self, workspace_id: UUID
    ) -> AsyncIterator[UserGroup]:
        """Stream the user groups whose default workspace is ``workspace_id``."""
        async with self._uow_factory() as uow:
            async for group in uow.user_groups.find_by_default_workspace_id(
                workspace_id
            ):
                yield group

    async def create(self, user_group: UserGroup) -> UserGroup:
        """Create a user group built by the caller."""
        return await self._crud.create(user_group)

    async def update(self, id: UUID, user_group: UserGroup) -> UserGroup:
        """Overwrite a user group. Requires manage permission."""
        return await self._crud.update_by_id(
            id, user_group, AclPermission.MANAGE_USER_GROUPS
        )

    async def delete(self, id: UUID) -> UserGroup:
        """Delete a user group. Requires delete permission."""
        return await self._crud.delete_by_id(id, AclPermission.DELETE_USER_GROUPS)

    async def add_users_by_id(
        self, id: UUID, user_ids: Sequence[UUID]
    ) -> UserGroup:
        """Resolve ``user_ids`` and append them to the group ``id``."""
        group = await self.get_by_id(id, AclPermission.MANAGE_USER_GROUPS)
        if group is None:
            raise UserGroupNotFoundError(str(id))

        users = await self._users.get_by_ids(user_ids)
        return await self.bulk_add_users(group, users)
