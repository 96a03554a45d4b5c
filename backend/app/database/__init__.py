"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    ping_mongo,
    close_connections,
    get_database,
    get_collection,
)
from app.database.databases import sample_db

__all__ = [
    "get_mongo_client",
    "ping_mongo",
    "close_connections",
    "get_database",
    "get_collection",
    "sample_db",
]
