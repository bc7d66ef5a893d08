from tests.shared.fixtures.database import (
    db_session,
    postgres_container,
    postgres_engine,
    postgres_session,
    sqlite_engine,
)
from tests.shared.fixtures.factories import make_user

__all__ = [
    "db_session",
    "make_user",
    "postgres_container",
    "postgres_engine",
    "postgres_session",
    "sqlite_engine",
]
