"""Shared fixtures: an in-memory database and an HTTP client bound to it."""

import os

# Never touch a developer's real database from the test suite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.infrastructure import database
from storefront.infrastructure.database import DatabaseSessionManager, get_db
from storefront.infrastructure.http.app import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def session(db_manager):
    async with db_manager.session() as db:
        yield db


@pytest.fixture
async def client(db_manager, monkeypatch):
    """HTTP client for the app, wired to the in-memory database.

    The lifespan is not run by ASGITransport, so the process-wide
    manager is pointed at the test database directly.
    """
    monkeypatch.setattr(database, "db_manager", db_manager)
    app = create_app()

    async def override_get_db():
        async with db_manager.session() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def _drop_app_log_handler():
    """CLI runs install a stream handler bound to CliRunner's stderr."""
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "storefront":
            logging.root.removeHandler(handler)
