"""MongoDB store with the async PyMongo driver.

Handles:
- Client lifecycle (created on startup, closed on shutdown)
- Collection access for the catalog
- Connection pooling (delegated to the driver)
"""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.server_api import ServerApi

from app.settings import get_settings

# Client and database handle (initialized on startup)
_client: AsyncMongoClient | None = None
_database: AsyncDatabase | None = None
logger = logging.getLogger("uvicorn.error")


async def init_mongo() -> None:
    """Initialize the MongoDB client.

    The driver connects lazily, so this never fails on an unreachable
    cluster; call ping_mongo() to validate connectivity.
    """
    global _client, _database

    settings = get_settings()
    _client = AsyncMongoClient(
        settings.mongodb_url,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        connectTimeoutMS=settings.mongodb_timeout_ms,
    )
    _database = _client[settings.db_name]


async def ping_mongo() -> None:
    """Round-trip a ping command to the cluster."""
    await _get_client().admin.command("ping")
    logger.info("MongoDB connected")


async def close_mongo() -> None:
    """Close MongoDB client and its connection pool."""
    global _client, _database
    if _client:
        await _client.close()
        _client = None
        _database = None


def _get_client() -> AsyncMongoClient:
    if _client is None:
        raise RuntimeError("MongoDB not initialized. Call init_mongo() first.")
    return _client


def get_database() -> AsyncDatabase:
    """Get the catalog database handle."""
    if _database is None:
        raise RuntimeError("MongoDB not initialized. Call init_mongo() first.")
    return _database


def get_collection(name: str) -> AsyncCollection[dict[str, Any]]:
    """Get a collection from the catalog database.

    Args:
        name: Collection name.

    Returns:
        Async collection handle.
    """
    return get_database()[name]


def products_collection() -> AsyncCollection[dict[str, Any]]:
    """Get the products collection."""
    return get_collection(get_settings().products_collection)


def categories_collection() -> AsyncCollection[dict[str, Any]]:
    """Get the categories collection."""
    return get_collection(get_settings().categories_collection)
