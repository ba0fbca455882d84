"""Generic repository-backed CRUD service."""

from collections.abc import Callable
from typing import Any, Generic, Optional, Protocol, TypeVar
from uuid import UUID

from core.validation import EntityValidator
from domain.entities.acl import AclPermission
from domain.entities.analytics import AnalyticsEvents
from domain.repositories.base_repository import ICrudRepository
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.analytics_service import AnalyticsService


class Identifiable(Protocol):
    @property
    def id(self) -> UUID | None: ...


EntityT = TypeVar("EntityT", bound=Identifiable)


class CrudService(Generic[EntityT]):
    """Create/read/update/delete for one entity type.

    Entity services hold an instance of this rather than subclassing it.
    Writes are validated first, then persisted and reported to analytics
    inside a single unit of work.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        repository: Callable[[IUnitOfWork], ICrudRepository[EntityT]],
        entity_type: str,
        validator: Optional[EntityValidator[EntityT]] = None,
        analytics_service: Optional[AnalyticsService] = None,
        describe: Optional[Callable[[EntityT], dict[str, Any]]] = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._repository = repository
        self._entity_type = entity_type
        self._validator = validator
        self._analytics = analytics_service
        self._describe = describe

    @property
    def entity_type(self) -> str:
        return self._entity_type

    async def get_by_id(
        self, id: UUID, permission: AclPermission | None = None
    ) -> EntityT | None:
        """Get an entity by ID, or None if missing or not visible."""
        async with self._uow_factory() as uow:
            return await self._repository(uow).find_by_id(id, permission)

    async def create(self, entity: EntityT) -> EntityT:
        """Validate and persist a new entity."""
        self._validate(entity)
        async with self._uow_factory() as uow:
            created = await self._repository(uow).create(entity)
            await self._record(uow, AnalyticsEvents.CREATE, created)
            await uow.commit()
            return created

    async def update_by_id(
        self, id: UUID, entity: EntityT, permission: AclPermission
    ) -> EntityT:
        """Validate and overwrite an existing entity."""
        self._validate(entity)
        async with self._uow_factory() as uow:
            updated = await self._repository(uow).update_by_id(id, entity, permission)
            await self._record(uow, AnalyticsEvents.UPDATE, updated)
            await uow.commit()
            return updated

    async def delete_by_id(self, id: UUID, permission: AclPermission) -> EntityT:
        """Delete an entity and return its last state."""
        async with self._uow_factory() as uow:
            deleted = await self._repository(uow).delete_by_id(id, permission)
            await self._record(uow, AnalyticsEvents.DELETE, deleted)
            await uow.commit()
            return deleted

    # --- Internal helpers ---

    def _validate(self, entity: EntityT) -> None:
        if self._validator:
            self._validator.validate(entity)

    async def _record(
        self, uow: IUnitOfWork, event: AnalyticsEvents, entity: EntityT
    ) -> None:
        if not self._analytics or entity.id is None:
            return
        properties = self._describe(entity) if self._describe else None
        await self._analytics.send_object_event(
            uow,
            event=event,
            entity_type=self._entity_type,
            entity_id=entity.id,
            properties=properties,
        )
