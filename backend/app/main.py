"""
Records API Backend - FastAPI Application

CRUD over username/password records stored in MongoDB (sample.dataset).
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api import register_error_handlers
from app.config import get_settings
from app.database.connections import get_mongo_client, ping_mongo, close_connections
from app.routers import health, records

logger = logging.getLogger("records_api")


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB client
    - Ping the primary; startup aborts if it is unreachable

    Shutdown:
    - Close the MongoDB client
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up Records API...")

    try:
        client = await get_mongo_client()
        await ping_mongo(client, timeout=settings.request_timeout_seconds)
    except Exception as e:
        logger.critical(f"Failed to connect the database cause {e!r}")
        raise
    logger.info("✓ Connected to MongoDB")

    yield

    logger.info("Shutting down Records API...")
    await close_connections()
    logger.info("✓ Database connections closed")


app = FastAPI(
    title="Records API",
    description="""
## Records API

Create, read, update and delete username/password records.

### Routes
- `GET /api/v1/collections` - list all records
- `GET /api/v1/collections/{name}` - first record with this username
- `POST /api/v1/create/collection` - insert a record
- `PUT /api/v1/update/collection/{id}` - change the username of a record
- `DELETE /api/v1/delete/collection/{name}` - delete the first record with this username

Reads answer **302 Found**.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(records.router)


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
