import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import goldbill.domain  # noqa: F401
from config import ApplicationConfig
from goldbill.depends import get_session


class IntegrationConfig(ApplicationConfig):
    AUTH_DISABLED = True
    SEED_ON_STARTUP = False
    ENABLE_SENTRY = 0
    SESSION_SECRET = "integration-secret"


class AuthIntegrationConfig(IntegrationConfig):
    AUTH_DISABLED = False


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create an in-memory SQLite engine shared by every connection of a test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


async def _client_for(config, db_session):
    from goldbill.api.app import create_app

    app = create_app(config)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(db_session):
    """Client for an application running without login"""
    async with await _client_for(IntegrationConfig, db_session) as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_client(db_session):
    """Client for an application that requires a session login"""
    async with await _client_for(AuthIntegrationConfig, db_session) as ac:
        yield ac
