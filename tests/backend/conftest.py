"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with collections that fail or
stall, for exercising the error and deadline paths of the record service.
"""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Collection Doubles
# =============================================================================

@pytest.fixture
def failing_collection():
    """
    A collection whose every call raises a driver error.

    The cursor returned by find() fails while being drained.
    """
    from pymongo.errors import ServerSelectionTimeoutError

    error = ServerSelectionTimeoutError("localhost:27017: connection refused")

    cursor = MagicMock()
    cursor.to_list = AsyncMock(side_effect=error)
    cursor.close = AsyncMock()

    collection = MagicMock()
    collection.find = MagicMock(return_value=cursor)
    collection.find_one = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.update_one = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)
    return collection


@pytest.fixture
def stalled_collection():
    """A collection whose every call sleeps far beyond any test deadline."""

    async def _stall(*args, **kwargs):
        await asyncio.sleep(30)

    cursor = MagicMock()
    cursor.to_list = AsyncMock(side_effect=_stall)
    cursor.close = AsyncMock()

    collection = MagicMock()
    collection.find = MagicMock(return_value=cursor)
    collection.find_one = AsyncMock(side_effect=_stall)
    collection.insert_one = AsyncMock(side_effect=_stall)
    collection.update_one = AsyncMock(side_effect=_stall)
    collection.delete_one = AsyncMock(side_effect=_stall)
    return collection
