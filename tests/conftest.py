"""
Pytest fixtures - test DB, client, repositories.
Challenge: Isolated tests; a fresh in-memory SQLite database per test.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from villa_api.db.base import Base
from villa_api.main import app
from villa_api.db.session import get_db, register_sqlite_functions
from villa_api.db.models import Villa
from villa_api.db.repositories import VillaRepository

from in_memory_repository import InMemoryVillaRepository

# One shared connection so every session sees the same in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def villa_repo(session: AsyncSession) -> VillaRepository:
    return VillaRepository(session)


@pytest.fixture
def memory_repo() -> InMemoryVillaRepository:
    """Repository double seeded with Pool View (id 1) and Beach View (id 2)."""
    return InMemoryVillaRepository.seeded()


@pytest_asyncio.fixture
async def pool_view(session: AsyncSession) -> Villa:
    villa = Villa(name="Pool View", details="Sea breeze", rate=200.0, sqft=100, occupancy=4)
    session.add(villa)
    await session.commit()
    await session.refresh(villa)
    return villa
