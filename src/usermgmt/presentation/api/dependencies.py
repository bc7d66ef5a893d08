"""FastAPI dependencies.

One engine and session factory per process; one session and one
``UserService`` per request. Routes commit the session after a successful
write.
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from usermgmt.application.services import UserService
from usermgmt.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from usermgmt.infrastructure.persistence.sqlalchemy.init_db import (
    create_schema,
    prepare_database_url,
)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return create_async_engine(prepare_database_url(), echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session; uncommitted work is rolled back on close."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    await create_schema(get_engine())


def get_user_service(session: DBSession) -> UserService:
    return UserService(user_repository=UserRepositorySQLAlchemy(session))


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
