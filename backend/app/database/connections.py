"""
Database connection management for MongoDB.
"""
import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ReadPreference

from app.config import get_settings
from app.database.databases import sample_db

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def ping_mongo(client: AsyncIOMotorClient, timeout: float) -> dict:
    """
    Verify the server is reachable by pinging the primary.

    Raises whatever the driver raises, or asyncio.TimeoutError when the
    ping does not complete within `timeout` seconds.
    """
    return await asyncio.wait_for(
        client.admin.command("ping", read_preference=ReadPreference.PRIMARY),
        timeout=timeout,
    )


async def close_connections():
    """Close the database connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB client closed")


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    client = await get_mongo_client()
    return client[db_name]


async def get_collection(
    name: str = sample_db.Collections.DATASET,
) -> AsyncIOMotorCollection:
    """
    Get a collection in the sample database.

    The collection is not created here; MongoDB creates it on first write.
    """
    db = await get_database(sample_db.DB_NAME)
    return db[name]
