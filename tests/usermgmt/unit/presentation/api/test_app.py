"""Tests for the application factory and its lifespan."""

import pytest
from fastapi.testclient import TestClient

from usermgmt.presentation.api.app import API_V1_PREFIX, create_app
from usermgmt.presentation.api.dependencies import get_engine, get_session_maker


@pytest.fixture
def sqlite_app_env(tmp_path, monkeypatch):
    """Point the shared engine at a file in an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_BACKEND", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", "data/usermgmt.db")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "true")
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    yield tmp_path / "data" / "usermgmt.db"
    get_engine.cache_clear()
    get_session_maker.cache_clear()


class TestLifespan:
    def test_startup_creates_tables_and_serves_requests(self, sqlite_app_env):
        app = create_app()

        with TestClient(app) as client:
            created = client.post(
                f"{API_V1_PREFIX}/users",
                json={
                    "name": "Alice",
                    "email": "alice@example.com",
                    "roles": ["Clinician"],
                },
            )
            listed = client.get(f"{API_V1_PREFIX}/users")

        assert sqlite_app_env.exists()
        assert created.status_code == 201
        assert [u["email"] for u in listed.json()] == ["alice@example.com"]

    def test_data_survives_restart(self, sqlite_app_env):
        with TestClient(create_app()) as client:
            client.post(
                f"{API_V1_PREFIX}/users",
                json={"name": "Bob", "email": "bob@example.com"},
            )

        get_engine.cache_clear()
        get_session_maker.cache_clear()

        with TestClient(create_app()) as client:
            summary = client.get(f"{API_V1_PREFIX}/users/summary").json()
            users = client.get(f"{API_V1_PREFIX}/users").json()

        assert [u["name"] for u in users] == ["Bob"]
        assert summary["clinician_count"] == 0


class TestDocs:
    def test_docs_hidden_without_debug(self, monkeypatch):
        monkeypatch.setenv("API_DEBUG", "false")

        client = TestClient(create_app())

        assert client.get("/docs").status_code == 404
        assert client.get("/health").status_code == 200
