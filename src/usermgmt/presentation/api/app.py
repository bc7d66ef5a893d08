"""FastAPI application for user administration.

User routes live under ``/api/v1/users``; ``/health`` stays unversioned so
probes survive a version bump. Interactive docs are only served when
``API_DEBUG`` is on.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usermgmt.presentation.api.dependencies import create_tables, get_engine
from usermgmt.presentation.api.exception_handlers import setup_exception_handlers
from usermgmt.presentation.api.routers import users_router
from usermgmt_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
NOISY_LOGGERS = ("httpx", "sqlalchemy.engine", "aiosqlite", "asyncpg")

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User administration.

**Roles** (combinable): `Administration`, `Clinician`, `Staff`, `Patient`

**Status** (one at a time): `None`, `Active`, `Deactive`, `Invited`

**Action** (one at a time): `None`, `Reactivate`, `Deactivate`, `ResendInvite`
""",
    },
]


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Send logs to stdout once per process at the configured level."""
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("usermgmt").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)
    if settings.auto_create_tables:
        await create_tables()

    yield

    await get_engine().dispose()
    logger.info("%s API stopped, connection pool disposed", settings.app_name)


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    debug_only = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Administration of users, their roles, status and actions.",
        version=API_VERSION,
        docs_url="/docs" if debug_only else None,
        redoc_url="/redoc" if debug_only else None,
        openapi_url="/openapi.json" if debug_only else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION, "api_versions": ["v1"]}

    return app


def serve() -> None:
    """Entry point for ``usermgmt-api``."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "usermgmt.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
