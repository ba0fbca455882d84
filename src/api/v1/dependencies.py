"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.analytics_service import AnalyticsService
from domain.services.user_group_service import UserGroupService
from domain.services.user_service import UserService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_analytics_service() -> AnalyticsService:
    """Get Analytics service instance."""
    return AnalyticsService(enabled=settings.analytics_enabled)


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory())


@lru_cache
def get_user_group_service() -> UserGroupService:
    """Get User Group service instance."""
    return UserGroupService(
        get_uow_factory(),
        analytics_service=get_analytics_service(),
        user_service=get_user_service(),
    )
