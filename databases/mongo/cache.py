from datetime import datetime, timedelta, timezone
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from databases.mongo.orm import DATABASE_ERRORS
from models.cache import CacheEntry
from utils.constants import (
    CACHE_COLLECTION,
    CACHE_INDEX_TTL_SECONDS,
    COMPLETE_CACHE_PREFIX,
    COMPLETE_CACHE_TTL,
    PAGE_CACHE_TTL,
)
from utils.logging import logger


def cache_ttl(key: str) -> timedelta:
    """Expiry window for a key: aggregates live longer than single token pages"""
    if key.startswith(COMPLETE_CACHE_PREFIX):
        return COMPLETE_CACHE_TTL
    return PAGE_CACHE_TTL


def _as_utc(value: datetime) -> datetime:
    # MongoDB hands back naive datetimes that are already UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


async def get_cached_data(key: str, now: datetime | None = None) -> Any | None:
    """Get a cached payload, deleting the entry instead if it has expired"""
    now = now or datetime.now(timezone.utc)
    try:
        entry = await CacheEntry.find_one({"key": key})
        if not entry:
            return None

        ttl = timedelta(seconds=entry.ttl_seconds) if entry.ttl_seconds else cache_ttl(key)
        if now - _as_utc(entry.timestamp) > ttl:
            logger.info(f"Cache entry {key} expired, deleting it")
            await entry.delete()
            return None
        return entry.data
    except DATABASE_ERRORS as e:
        logger.error(f"Error reading cache entry {key}: {e}")
        return None


async def set_cached_data(key: str, data: Any, now: datetime | None = None, ttl: timedelta | None = None) -> Any:
    """Upsert a cache entry with a fresh timestamp. Failures are logged, never raised.

    A ttl shorter than the key's usual window is stored on the entry; without one the
    entry goes back to the window its key implies.
    """
    update = {"$set": {"data": data, "timestamp": now or datetime.now(timezone.utc)}}
    if ttl:
        update["$set"]["ttlSeconds"] = int(ttl.total_seconds())
    else:
        update["$unset"] = {"ttlSeconds": ""}
    try:
        await CacheEntry.get_motor_collection().update_one({"key": key}, update, upsert=True)
    except DATABASE_ERRORS as e:
        logger.error(f"Error writing cache entry {key}: {e}")
    return data


async def recreate_cache_collection(database: AsyncIOMotorDatabase) -> None:
    """Drop the cache collection and create it again with its key and TTL indexes"""
    if CACHE_COLLECTION in await database.list_collection_names():
        logger.info("Dropping existing cache collection")
        await database.drop_collection(CACHE_COLLECTION)
    else:
        logger.info("Cache collection did not exist, creating a new one")

    await database.create_collection(CACHE_COLLECTION)
    collection = database[CACHE_COLLECTION]
    await collection.create_index([("key", ASCENDING)], unique=True)
    await collection.create_index([("timestamp", ASCENDING)], expireAfterSeconds=CACHE_INDEX_TTL_SECONDS)
    logger.info("Cache collection recreated with key and TTL indexes")
