"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from core.exceptions import UserNotFoundError
from domain.entities.user import User
from domain.services.user_service import UserService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> UserService:
    return UserService(lambda: uow)


class TestGetByIds:
    @pytest.mark.asyncio
    async def test_returns_users_from_repository(
        self, service: UserService, uow: FakeUnitOfWork, alice: User, bob: User
    ):
        uow.users.get_many.return_value = [bob, alice]

        result = await service.get_by_ids([bob.id, alice.id])

        assert result == [bob, alice]

    @pytest.mark.asyncio
    async def test_raises_for_first_unknown_id(
        self, service: UserService, uow: FakeUnitOfWork, alice: User
    ):
        first_missing, second_missing = uuid4(), uuid4()
        uow.users.get_many.return_value = [alice]

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get_by_ids([alice.id, first_missing, second_missing])

        assert exc_info.value.details == {"user_id": str(first_missing)}

    @pytest.mark.asyncio
    async def test_empty_ids(self, service: UserService, uow: FakeUnitOfWork):
        uow.users.get_many.return_value = []

        assert await service.get_by_ids([]) == []
