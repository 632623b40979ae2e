from datetime import datetime, timezone

from pymongo import ReturnDocument

from models.stats import VISITS_COUNTER, VisitCounter


async def get_visit_count() -> int:
    """Get the visit count, creating the counter at zero if it does not exist yet"""
    counter = await VisitCounter.find_one({"type": VISITS_COUNTER})
    if not counter:
        counter = await VisitCounter(type=VISITS_COUNTER, visits=0).insert()
    return counter.visits


async def increment_visit_count() -> int:
    """Atomically increment the visit counter and return the new value"""
    counter = await VisitCounter.get_motor_collection().find_one_and_update(
        {"type": VISITS_COUNTER},
        {"$inc": {"count": 1}, "$set": {"lastUpdated": datetime.now(timezone.utc)}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["count"] if counter else 1
