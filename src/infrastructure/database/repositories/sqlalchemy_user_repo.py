"""SQLAlchemy implementation of User repository."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import User
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_many(self, ids: Sequence[UUID]) -> list[User]:
        """Get the known users among ``ids``, keeping input order and repeats."""
        if not ids:
            return []

        stmt = select(UserModel).where(UserModel.id.in_(set(ids)))
        result = await self._session.execute(stmt)
        by_id = {model.id: self._to_entity(model) for model in result.scalars()}
        return [by_id[user_id] for user_id in ids if user_id in by_id]

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            created_at=model.created_at,
        )
