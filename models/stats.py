from datetime import datetime, timezone

from beanie import Document
from pydantic import Field

VISITS_COUNTER = "visits"


class VisitCounter(Document):
    type: str = Field(VISITS_COUNTER)
    # Stored as "count"; the attribute name stays clear of Document.count().
    visits: int = Field(0, alias="count")
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="lastUpdated")

    class Settings:
        name = "stats"
