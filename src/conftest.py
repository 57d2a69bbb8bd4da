import contextlib

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.main import app
from src.models.base import BaseModel

# Importing the ORM models registers their tables on the metadata
from src.guests.repository import orm_models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def client_factory():
    """Build an HTTP client for the app with the given dependency overrides."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture(scope="function")
async def db_session():
    """Create a session against a fresh in-memory database."""
    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
