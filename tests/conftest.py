"""
Global test fixtures for the Records API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Record document factories
- FastAPI test clients wired to the mock database
"""

import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def mock_sample_db(mock_async_mongo_client):
    """Provide mock sample database."""
    return mock_async_mongo_client["sample"]


@pytest.fixture
def dataset_collection(mock_sample_db):
    """Provide the mock sample.dataset collection."""
    return mock_sample_db["dataset"]


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def alice_data() -> dict:
    """Create request body for alice."""
    return {"username": "alice", "password": "pw1"}


@pytest.fixture
def mock_record() -> dict:
    """A complete record document as stored in MongoDB."""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "username": "carol",
        "password": "secret",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from app.main import app
    return app


@pytest.fixture
def client(app, mock_async_mongo_client, dataset_collection) -> Generator:
    """
    Create a TestClient whose startup ping succeeds and whose record
    routes talk to the mock dataset collection.
    """
    from app.routers.records import get_record_service
    from app.services.record_service import RecordService

    async def _record_service():
        return RecordService(dataset_collection)

    app.dependency_overrides[get_record_service] = _record_service

    with patch("app.main.get_mongo_client", AsyncMock(return_value=mock_async_mongo_client)), \
         patch("app.main.ping_mongo", AsyncMock(return_value={"ok": 1.0})):
        with TestClient(app) as c:
            yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app, dataset_collection):
    """
    Create an async test client.

    The lifespan is not run; record routes use the mock dataset collection.
    """
    from httpx import AsyncClient, ASGITransport
    from app.routers.records import get_record_service
    from app.services.record_service import RecordService

    async def _record_service():
        return RecordService(dataset_collection)

    app.dependency_overrides[get_record_service] = _record_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def use_record_service(client, app):
    """
    Return a function that routes record requests to a given service.

    Overrides installed this way are cleared by the `client` fixture.
    """
    from app.routers.records import get_record_service

    def _use(service):
        async def _override():
            return service
        app.dependency_overrides[get_record_service] = _override

    return _use
