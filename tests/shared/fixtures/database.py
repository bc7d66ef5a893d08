"""Database fixtures.

``sqlite_engine``/``db_session`` give each test a fresh in-memory SQLite
database. ``postgres_container``/``postgres_engine`` start an ephemeral
PostgreSQL via Testcontainers for integration tests.

Usage:
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.add(user)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from usermgmt.infrastructure.persistence.sqlalchemy import Base

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest_asyncio.fixture
async def sqlite_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # One shared connection keeps the memory DB alive
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(sqlite_engine):
    """AsyncSession bound to the in-memory SQLite engine."""
    session_maker = async_sessionmaker(
        sqlite_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is automatically cleaned up when the session ends.
    """
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest_asyncio.fixture
async def postgres_engine(postgres_container):
    """Async engine on the test container, with a clean schema per test."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    engine = create_async_engine(async_url, echo=False, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def postgres_session(postgres_engine):
    """AsyncSession on the PostgreSQL test container."""
    session_maker = async_sessionmaker(
        postgres_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
