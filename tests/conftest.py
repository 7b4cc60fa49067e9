"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from resume_api.config import settings
from resume_api.core.database import Base, get_db
from resume_api.core.permissions.models import Permission  # noqa: F401
from resume_api.main import create_app

# Import all models to ensure they're registered with Base.metadata
from resume_api.modules.developers.models import Developer  # noqa: F401
from resume_api.modules.users.models import User  # noqa: F401
from tests.factories import create_test_token


# Test database URL - uses same DB with _test suffix
TEST_DATABASE_URL = settings.async_database_url.rsplit("/", 1)[0] + "/resume_test"


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build Authorization headers for an external user ID.

    Usage:
        client.get("/api/v1/developers", headers=auth_headers("auth0|alice"))
    """

    def _headers(external_user_id: str = "auth0|user", permissions: list[str] | None = None):
        token = create_test_token(external_user_id, permissions)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(auth_headers) -> dict[str, str]:
    """Authorization headers for a user holding the admin claim."""
    return auth_headers("auth0|admin", [settings.admin_permission])


# ============================================================
# Application Fixtures (no database)
# ============================================================


@pytest.fixture
async def app():
    """Create test application instance.

    Tests override service dependencies on this app, so it never
    touches the database.
    """
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Database Fixtures
# ============================================================


@pytest.fixture
async def engine():
    """Create test database engine.

    Skips the test when the test database is unreachable.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=NullPool,
        echo=False,
    )

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, SQLAlchemyError) as exc:
        await engine.dispose()
        pytest.skip(f"Test database unavailable: {exc}")

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(
            bind=conn, join_transaction_mode="create_savepoint"
        ) as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def db_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client whose requests share the test session."""
    application = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=application),
        base_url="http://test",
    ) as client:
        yield client

    application.dependency_overrides.clear()
