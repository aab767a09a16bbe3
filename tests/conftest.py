"""
Global test fixtures for Mongo Browser.

This module provides shared fixtures for all tests including:
- Mock MongoDB server (mongomock-motor) and closable client handles
- Settings with short timeouts
- Session registry and FastAPI app wired to the mock server
- Sample documents
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import InvalidOperation

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

class _AdminDatabase:
    """Answers the connect-time ping."""

    def __init__(self, handle: "MockMongoHandle"):
        self._handle = handle

    async def command(self, name, *args, **kwargs):
        self._handle._check_open()
        return {"ok": 1.0}


class MockMongoHandle:
    """
    Client handle onto a shared in-memory server.

    Behaves like a motor client for the calls the app makes, and refuses
    any use after close() the way pymongo does.
    """

    def __init__(self, server, uri: str, **options):
        self._server = server
        self.uri = uri
        self.options = options
        self.closed = False

    def _check_open(self):
        if self.closed:
            raise InvalidOperation("Cannot use MongoClient after close")

    @property
    def admin(self):
        return _AdminDatabase(self)

    def __getitem__(self, name):
        self._check_open()
        return self._server[name]

    def close(self):
        self.closed = True


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB server using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        yield AsyncMongoMockClient()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest.fixture
def mongo_factory(mock_async_mongo_client):
    """
    Client factory connecting every handle to the same mock server.

    Created handles are recorded on ``factory.handles``.
    """
    handles = []

    def factory(uri, **options):
        handle = MockMongoHandle(mock_async_mongo_client, uri, **options)
        handles.append(handle)
        return handle

    factory.handles = handles
    return factory


@pytest_asyncio.fixture
async def seeded_items(mock_async_mongo_client):
    """Insert five documents into testdb.items and return them."""
    docs = [{"name": f"item-{i}", "position": i} for i in range(5)]
    await mock_async_mongo_client["testdb"]["items"].insert_many(docs)
    await mock_async_mongo_client["testdb"]["empty"].insert_one({"tmp": True})
    await mock_async_mongo_client["testdb"]["empty"].delete_many({})
    return docs


@pytest.fixture
def sample_document() -> dict:
    """A document covering objectId, string, array, date and boolean fields."""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "name": "a",
        "tags": ["x"],
        "when": datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc),
        "active": True,
    }


# =============================================================================
# Settings / Registry Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with short timeouts for fast failure paths."""
    from mongobrowser.config import Settings

    return Settings(
        connect_timeout_ms=500,
        server_selection_timeout_ms=500,
        log_level="DEBUG",
    )


@pytest.fixture
def registry(test_settings, mongo_factory):
    """A SessionRegistry wired to the mock server."""
    from mongobrowser.database.registry import SessionRegistry

    return SessionRegistry(test_settings, client_factory=mongo_factory)


@pytest.fixture
def connect_params() -> dict:
    """Connect request body for the mock server."""
    return {
        "host": "localhost",
        "port": 27017,
        "database": "testdb",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, registry):
    """
    Create FastAPI app for testing with the mock registry injected.
    """
    from mongobrowser.main import create_app

    return create_app(settings=test_settings, registry=registry)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for tests that also need to await the mock server.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
