"""Root pytest configuration.

Layout::

    tests/
        usermgmt/unit/         no external services; SQLite in memory at most
        usermgmt/integration/  PostgreSQL via Testcontainers (needs Docker)
        shared/                fixtures and factories used by both

Integration tests are skipped unless ``--run-integration`` (or
``RUN_INTEGRATION=1``) is given. ``--run-all`` / ``RUN_ALL_TESTS=1`` runs
everything. ``config/.env.test`` is loaded first when present.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from usermgmt_config import clear_settings_cache

TEST_ENV_FILE = Path(__file__).resolve().parents[1] / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    group = parser.getgroup("usermgmt")
    group.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="include tests marked integration (starts a PostgreSQL container)",
    )
    group.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="run every collected test, ignoring skip markers set here",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: needs a real PostgreSQL instance; skipped by default",
    )
    config.addinivalue_line("markers", "slow: takes more than a second")


def pytest_collection_modifyitems(config, items):
    run_everything = config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS")
    run_integration = config.getoption("--run-integration") or _flag_enabled(
        "RUN_INTEGRATION",
    )
    if run_everything or run_integration:
        return

    skip = pytest.mark.skip(reason="integration test; pass --run-integration")
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Give every test freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
