"""
Pytest configuration for usermgmt tests.

Re-exports the shared database fixtures and provides repositories and a
service wired to the in-memory store.
"""

import pytest

from tests.shared.fixtures.database import (
    db_session,
    postgres_container,
    postgres_engine,
    postgres_session,
    sqlite_engine,
)
from usermgmt.application.services import UserService
from usermgmt.infrastructure.persistence.memory import InMemoryUserRepository

__all__ = [
    "db_session",
    "postgres_container",
    "postgres_engine",
    "postgres_session",
    "sqlite_engine",
]


@pytest.fixture
def memory_repo() -> InMemoryUserRepository:
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def user_service(memory_repo) -> UserService:
    """UserService backed by the in-memory store."""
    return UserService(user_repository=memory_repo)
