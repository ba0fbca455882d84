"""Unit tests for the generic CrudService."""

from dataclasses import dataclass
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from pydantic import BaseModel, Field

from core.exceptions import EntityValidationError, PermissionDeniedError
from core.validation import EntityValidator
from domain.entities.acl import AclPermission
from domain.entities.analytics import AnalyticsEvents
from domain.services.base_service import CrudService
from tests.unit.conftest import FakeUnitOfWork


@dataclass(frozen=True)
class Widget:
    label: str
    id: UUID | None = None


class WidgetRules(BaseModel):
    label: str = Field(..., min_length=3)


@pytest.fixture
def repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def analytics() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def crud(uow: FakeUnitOfWork, repository: AsyncMock, analytics: AsyncMock) -> CrudService[Widget]:
    return CrudService(
        lambda: uow,
        repository=lambda _: repository,
        entity_type="Widget",
        validator=EntityValidator(WidgetRules, "Widget"),
        analytics_service=analytics,
        describe=lambda w: {"label": w.label},
    )


class TestCrudService:
    @pytest.mark.asyncio
    async def test_get_by_id_defaults_to_no_permission(
        self, crud: CrudService[Widget], repository: AsyncMock
    ):
        widget = Widget(label="gear", id=uuid4())
        repository.find_by_id.return_value = widget

        assert await crud.get_by_id(widget.id) is widget
        repository.find_by_id.assert_awaited_once_with(widget.id, None)

    @pytest.mark.asyncio
    async def test_create_validates_before_touching_repository(
        self, crud: CrudService[Widget], repository: AsyncMock, uow: FakeUnitOfWork
    ):
        with pytest.raises(EntityValidationError) as exc_info:
            await crud.create(Widget(label="x"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid Widget"
        repository.create.assert_not_awaited()
        assert uow.entered == 0

    @pytest.mark.asyncio
    async def test_create_records_event_in_same_unit_of_work(
        self,
        crud: CrudService[Widget],
        repository: AsyncMock,
        analytics: AsyncMock,
        uow: FakeUnitOfWork,
    ):
        created = Widget(label="gear", id=uuid4())
        repository.create.return_value = created

        result = await crud.create(Widget(label="gear"))

        assert result is created
        analytics.send_object_event.assert_awaited_once_with(
            uow,
            event=AnalyticsEvents.CREATE,
            entity_type="Widget",
            entity_id=created.id,
            properties={"label": "gear"},
        )
        assert uow.committed

    @pytest.mark.asyncio
    async def test_update_records_update_event(
        self, crud: CrudService[Widget], repository: AsyncMock, analytics: AsyncMock
    ):
        widget = Widget(label="sprocket", id=uuid4())
        repository.update_by_id.return_value = widget

        await crud.update_by_id(widget.id, widget, AclPermission.MANAGE_USER_GROUPS)

        repository.update_by_id.assert_awaited_once_with(
            widget.id, widget, AclPermission.MANAGE_USER_GROUPS
        )
        assert analytics.send_object_event.await_args.kwargs["event"] == AnalyticsEvents.UPDATE

    @pytest.mark.asyncio
    async def test_delete_records_delete_event(
        self, crud: CrudService[Widget], repository: AsyncMock, analytics: AsyncMock
    ):
        widget = Widget(label="sprocket", id=uuid4())
        repository.delete_by_id.return_value = widget

        result = await crud.delete_by_id(widget.id, AclPermission.DELETE_USER_GROUPS)

        assert result is widget
        assert analytics.send_object_event.await_args.kwargs["event"] == AnalyticsEvents.DELETE

    @pytest.mark.asyncio
    async def test_failed_write_skips_analytics_and_commit(
        self,
        crud: CrudService[Widget],
        repository: AsyncMock,
        analytics: AsyncMock,
        uow: FakeUnitOfWork,
    ):
        repository.delete_by_id.side_effect = PermissionDeniedError("delete:userGroups", "w")

        with pytest.raises(PermissionDeniedError):
            await crud.delete_by_id(uuid4(), AclPermission.DELETE_USER_GROUPS)

        analytics.send_object_event.assert_not_awaited()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_works_without_validator_or_analytics(
        self, uow: FakeUnitOfWork, repository: AsyncMock
    ):
        crud: CrudService[Widget] = CrudService(
            lambda: uow, repository=lambda _: repository, entity_type="Widget"
        )
        created = Widget(label="x", id=uuid4())
        repository.create.return_value = created

        assert await crud.create(Widget(label="x")) is created
        assert crud.entity_type == "Widget"
