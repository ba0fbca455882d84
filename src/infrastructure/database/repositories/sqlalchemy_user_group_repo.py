"""SQLAlchemy implementation of User Group repository."""

from collections.abc import AsyncIterator, Callable
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError

from core.context import get_current_principal
from core.exceptions import (
    PermissionDeniedError,
    UserGroupConflictError,
    UserGroupNotFoundError,
)
from domain.entities.acl import AclPermission, Policy, is_permitted
from domain.entities.user_group import UserGroup, UserInGroup
from infrastructure.database.models import UserGroupModel


class SQLAlchemyUserGroupRepository:
    """SQLAlchemy implementation of IUserGroupRepository.

    Permission checks run against the policies stored on each row, for the
    principal returned by ``principal`` (the request's user by default).
    """

    def __init__(
        self,
        session: AsyncSession,
        principal: Callable[[], UUID | None] = get_current_principal,
    ) -> None:
        self._session = session
        self._principal = principal

    async def find_by_id(
        self, id: UUID, permission: AclPermission | None = None
    ) -> UserGroup | None:
        """Get a user group by ID; None if missing or not permitted."""
        model = await self._get_model(id)
        if not model:
            return None

        entity = self._to_entity(model)
        if not is_permitted(entity.policies, permission, self._principal()):
            return None
        return entity

    async def create(self, entity: UserGroup) -> UserGroup:
        """Create a new user group. The ID and version are assigned here."""
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update_by_id(
        self, id: UUID, entity: UserGroup, permission: AclPermission
    ) -> UserGroup:
        """Overwrite a user group's mutable fields.

        Raises:
            UserGroupNotFoundError: No group with this ID.
            PermissionDeniedError: The principal lacks ``permission``.
            UserGroupConflictError: ``entity`` was read at an older version,
                or another transaction updated the row first.
        """
        model = await self._get_permitted_model(id, permission)

        if model.version != entity.version:
            raise UserGroupConflictError(str(id))

        model.name = entity.name
        model.description = entity.description
        model.default_workspace_id = entity.default_workspace_id
        model.users = [self._member_to_dict(m) for m in entity.users]
        model.policies = [self._policy_to_dict(p) for p in entity.policies]
        # Every update is a write, even when nothing changed, so the version moves.
        flag_modified(model, "users")

        try:
            await self._session.flush()
        except StaleDataError as e:
            raise UserGroupConflictError(str(id)) from e

        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete_by_id(self, id: UUID, permission: AclPermission) -> UserGroup:
        """Delete a user group and return its last state."""
        model = await self._get_permitted_model(id, permission)
        entity = self._to_entity(model)

        await self._session.delete(model)
        await self._session.flush()
        return entity

    async def find_by_default_workspace_id(
        self, workspace_id: UUID
    ) -> AsyncIterator[UserGroup]:
        """Stream user groups whose default workspace is ``workspace_id``."""
        stmt = (
            select(UserGroupModel)
            .where(UserGroupModel.default_workspace_id == workspace_id)
            .order_by(UserGroupModel.created_at)
        )
        result = await self._session.stream_scalars(stmt)
        async for model in result:
            yield self._to_entity(model)

    # --- Internal helpers ---

    async def _get_model(self, id: UUID | None) -> UserGroupModel | None:
        stmt = select(UserGroupModel).where(UserGroupModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_permitted_model(
        self, id: UUID, permission: AclPermission
    ) -> UserGroupModel:
        model = await self._get_model(id)
        if not model:
            raise UserGroupNotFoundError(str(id))

        policies = [self._policy_from_dict(p) for p in model.policies]
        if not is_permitted(policies, permission, self._principal()):
            raise PermissionDeniedError(permission.value, str(id))
        return model

    def _to_entity(self, model: UserGroupModel) -> UserGroup:
        """Convert ORM model to domain entity."""
        return UserGroup(
            id=model.id,
            name=model.name,
            description=model.description,
            default_workspace_id=model.default_workspace_id,
            users=tuple(self._member_from_dict(m) for m in model.users),
            policies=tuple(self._policy_from_dict(p) for p in model.policies),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: UserGroup) -> UserGroupModel:
        """Convert domain entity to ORM model (ID and version left to the DB)."""
        return UserGroupModel(
            name=entity.name,
            description=entity.description,
            default_workspace_id=entity.default_workspace_id,
            users=[self._member_to_dict(m) for m in entity.users],
            policies=[self._policy_to_dict(p) for p in entity.policies],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def _member_to_dict(member: UserInGroup) -> dict[str, Any]:
        return {"id": str(member.id), "username": member.username, "name": member.name}

    @staticmethod
    def _member_from_dict(data: dict[str, Any]) -> UserInGroup:
        return UserInGroup(
            id=UUID(data["id"]),
            username=data["username"],
            name=data.get("name"),
        )

    @staticmethod
    def _policy_to_dict(policy: Policy) -> dict[str, Any]:
        return {
            "permission": policy.permission.value,
            "user_ids": sorted(str(u) for u in policy.user_ids),
        }

    @staticmethod
    def _policy_from_dict(data: dict[str, Any]) -> Policy:
        return Policy(
            permission=AclPermission(data["permission"]),
            user_ids=frozenset(UUID(u) for u in data.get("user_ids", [])),
        )
