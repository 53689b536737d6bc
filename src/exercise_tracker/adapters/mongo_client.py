"""MongoDB client and ODM bootstrap."""

import logging

from beanie import init_beanie
from pymongo import AsyncMongoClient

from exercise_tracker.adapters.mongo_documents import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


def create_mongo_client(uri: str) -> AsyncMongoClient:
    """Create a lazily-connecting client that returns timezone-aware dates."""
    return AsyncMongoClient(uri, tz_aware=True)


async def init_odm(client: AsyncMongoClient, default_database: str) -> None:
    """Verify connectivity and bind the document models to the database."""
    database = client.get_default_database(default=default_database)
    await client.admin.command("ping")
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    logger.info("MongoDB connected", extra={"database": database.name})
