import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.append(str(Path(__file__).parents[1] / "src"))

from budgethero.models.base import Base

# Point this at a Postgres database to run the integration tests against it.
# Without it each test gets a throwaway SQLite file.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'budgethero_test.db'}"
    engine = create_async_engine(url, echo=False)
    yield engine
    await engine.dispose()


@pytest.fixture(scope="function")
async def setup_database(test_engine):
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests never open a connection.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db_session(test_engine, setup_database):
    """Provide test database session with fresh connection per test."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_db():
    """AsyncSession stand-in for tests that only check call flow."""
    return AsyncMock(spec=AsyncSession)
