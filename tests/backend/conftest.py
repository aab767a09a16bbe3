"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for failing
drivers and response assertions.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Driver Fixtures
# =============================================================================

@pytest.fixture
def unreachable_factory():
    """
    Client factory whose clients fail server selection on ping.

    Created clients are recorded on ``factory.clients`` so tests can assert
    they were closed.
    """
    clients = []

    def factory(uri, **options):
        client = MagicMock()
        client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("localhost:1: [Errno 111] Connection refused")
        )
        clients.append(client)
        return client

    factory.clients = clients
    return factory


@pytest.fixture
def auth_failing_factory():
    """Client factory whose clients reject the credentials."""
    clients = []

    def factory(uri, **options):
        client = MagicMock()
        client.admin.command = AsyncMock(
            side_effect=OperationFailure("Authentication failed.", code=18)
        )
        clients.append(client)
        return client

    factory.clients = clients
    return factory


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the structured error body."""
    def _assert(response, status_code: int, message: str, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert data["message"] == message
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
