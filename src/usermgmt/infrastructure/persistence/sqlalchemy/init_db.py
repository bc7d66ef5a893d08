"""Schema management for the users table.

``create_schema``/``drop_schema`` work on any async engine and are reused
by the API lifespan. The ``db_*`` functions back the console scripts and
build a throwaway engine from settings.
"""

import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers UserModel on Base.metadata
import usermgmt.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from usermgmt.infrastructure.persistence.sqlalchemy.base import Base
from usermgmt_config.settings import get_settings

logger = logging.getLogger(__name__)


def prepare_database_url() -> str:
    """Database URL from settings, creating the SQLite file's directory if needed."""
    url = get_settings().database_url
    if url.startswith("sqlite"):
        # aiosqlite will not create the parent directory of the file
        Path(url.split(":///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)
    return url


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables and rows are left alone."""
    logger.info("Creating missing tables on %s", engine.url.render_as_string())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(engine: AsyncEngine) -> None:
    logger.warning("Dropping all tables on %s", engine.url.render_as_string())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _run_with_engine(*steps) -> None:
    engine = create_async_engine(prepare_database_url(), pool_pre_ping=True)
    try:
        for step in steps:
            await step(engine)
    finally:
        await engine.dispose()


def _confirm_destructive() -> None:
    """Ask before dropping data unless ``--force``/``-f`` was passed."""
    url = get_settings().database_url
    print(f"Database: {url.rsplit('@', 1)[-1]}")

    if "--force" in sys.argv or "-f" in sys.argv:
        return

    answer = input("This deletes ALL user records. Type 'yes' to continue: ")
    if answer.strip().lower() != "yes":
        print("Aborted.")
        sys.exit(1)


def db_init():
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_run_with_engine(create_schema))
    logger.info("Schema ready")


def db_drop():
    logging.basicConfig(level=logging.INFO)
    _confirm_destructive()
    asyncio.run(_run_with_engine(drop_schema))
    logger.info("Tables dropped")


def db_reset():
    logging.basicConfig(level=logging.INFO)
    _confirm_destructive()
    asyncio.run(_run_with_engine(drop_schema, create_schema))
    logger.info("Schema recreated")
