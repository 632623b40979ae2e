from datetime import datetime, timezone
from typing import Any

from beanie import Document, Indexed
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from utils.constants import CACHE_COLLECTION, CACHE_INDEX_TTL_SECONDS


class CacheEntry(Document):
    key: Indexed(str, unique=True)
    data: Any = Field(None)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    # Overrides the expiry window picked from the key.
    ttl_seconds: int | None = Field(None, alias="ttlSeconds")

    class Settings:
        name = CACHE_COLLECTION
        indexes = [IndexModel([("timestamp", ASCENDING)], expireAfterSeconds=CACHE_INDEX_TTL_SECONDS)]
