"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.config import Settings
from src.app.containers import Container
from src.app.main import create_app
from src.sdk import RegistryClient
from src.shared.database.database import Database, DatabaseSettings


@pytest.fixture
def sqlite_url(tmp_path):
    """A file-backed SQLite database, fresh for every test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}"


@pytest.fixture
def test_settings(sqlite_url):
    return Settings(_env_file=None, database_url=sqlite_url)


@pytest_asyncio.fixture(scope="function")
async def clean_database(sqlite_url):
    """
    Create database instance with an empty schema.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=sqlite_url))
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture(scope="function")
def test_container(test_settings, clean_database):
    """
    Create a test container for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the settings and the database singleton with the test database.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.override(providers.Object(clean_database))

    yield container

    container.unwire()
    container.database.reset_override()
    container.config.reset_override()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Tables are already created by clean_database fixture
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def registry_client(test_app):
    """
    Create an API client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = RegistryClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


# =========================================================================
# Repository and mediator fixtures from container
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def mediator(test_container):
    """Get the mediator, wired to the test database, from container."""
    return test_container.mediator()
