from beanie import init_beanie
from beanie.exceptions import CollectionWasNotInitialized
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from databases.mongo import MODELS
from utils.constants import DATABASE_NAME, MONGODB_TIMEOUT_MS, MONGODB_URI
from utils.logging import logger

# Raised by any document operation when MongoDB is unreachable or was never initialized.
DATABASE_ERRORS = (PyMongoError, CollectionWasNotInitialized)


async def init_db(client: AsyncIOMotorClient | None = None) -> AsyncIOMotorDatabase | None:
    """Connect to MongoDB and initialize the Beanie models.

    Returns None when the server cannot be reached; the app keeps serving pages and
    every database-backed lookup degrades to its fallback value.
    """
    client = client or AsyncIOMotorClient(MONGODB_URI, serverSelectionTimeoutMS=MONGODB_TIMEOUT_MS)
    database = client[DATABASE_NAME]
    logger.info(f"Connecting to MongoDB database {DATABASE_NAME}...")
    try:
        await database.command("ping")
        await init_beanie(database=database, document_models=MODELS)
    except PyMongoError as e:
        logger.error(f"MongoDB unavailable, continuing without persistence: {e}")
        client.close()
        return None
    logger.info("MongoDB connected and Beanie models initialized.")
    return database


def close_db(database: AsyncIOMotorDatabase | None) -> None:
    """Close the client behind a database handle returned by init_db"""
    if database is not None:
        database.client.close()
        logger.info("MongoDB connection closed.")
