"""Shared fixtures for unit tests."""

from collections.abc import AsyncIterator, Iterable
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.user import User
from domain.entities.user_group import UserGroup


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.user_groups = AsyncMock()
        self.users = AsyncMock()
        self.analytics = AsyncMock()
        self.committed = False
        self.rolled_back = False
        self.entered = 0

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.entered += 1
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


async def aiter_of(items: Iterable[Any]) -> AsyncIterator[Any]:
    """Async iterator over ``items``, like a streamed query result."""
    for item in items:
        yield item


async def echo_update(id: UUID, entity: UserGroup, permission: Any) -> UserGroup:
    """Stand-in for update_by_id that stores the entity as given."""
    return entity


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def workspace_id() -> UUID:
    """A random workspace ID."""
    return uuid4()


@pytest.fixture
def alice() -> User:
    return User(email="alice@example.com", name="Alice")


@pytest.fixture
def bob() -> User:
    return User(email="bob@example.com", name="Bob")
