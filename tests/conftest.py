"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from uuid import UUID, uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base, UserModel
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed test user ID for consistency
TEST_USER_ID = uuid4()


@pytest.fixture(scope="session")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture(scope="session")
async def setup_database(engine: AsyncEngine) -> AsyncGenerator[None, None]:
    """Create all tables once per session."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="session")
async def session_factory(
    engine: AsyncEngine, setup_database: None
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create session factory."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield factory


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def make_user(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[UUID]]:
    """Insert a user row and return its ID."""

    async def _make_user(
        email: str | None = None, name: str | None = None, id: UUID | None = None
    ) -> UUID:
        user_id = id or uuid4()
        async with session_factory() as session:
            existing = await session.get(UserModel, user_id)
            if not existing:
                session.add(
                    UserModel(
                        id=user_id,
                        email=email or f"{user_id.hex[:12]}@example.com",
                        name=name,
                    )
                )
                await session.commit()
        return user_id

    return _make_user


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user with fixed ID."""
    return TokenUser(
        id=TEST_USER_ID,
        email="test@example.com",
        name="Test User",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_headers(auth_provider: JWTAuthProvider, test_user: TokenUser) -> dict[str, str]:
    """Create authorization headers for the test user."""
    return {"Authorization": f"Bearer {auth_provider.create_token(test_user)}"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth, no database overrides)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def authenticated_client(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    make_user: Callable[..., Awaitable[UUID]],
    test_user: TokenUser,
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create authenticated test client with database and auth overrides.

    This client:
    - Uses the in-memory SQLite database
    - Injects a user row for the test user
    - Verifies real bearer tokens signed by the test auth provider
    - Overrides the user group service to use the test UoW factory
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import get_user_group_service
    from domain.services.analytics_service import AnalyticsService
    from domain.services.user_group_service import UserGroupService
    from main import create_app

    app = create_app()

    await make_user(id=test_user.id, email=test_user.email, name=test_user.name)

    service = UserGroupService(uow_factory, analytics_service=AnalyticsService())

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_group_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {auth_provider.create_token(test_user)}"},
    ) as c:
        yield c

    app.dependency_overrides.clear()
