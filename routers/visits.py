from fastapi import APIRouter, HTTPException

from databases.mongo.orm import DATABASE_ERRORS
from databases.mongo.stats import get_visit_count, increment_visit_count
from utils.logging import logger

router = APIRouter(prefix="/api/visits", tags=["visits"])


@router.get("")
async def get_visits() -> dict:
    try:
        return {"count": await get_visit_count()}
    except DATABASE_ERRORS as e:
        logger.error(f"Error getting visit count: {e}")
        raise HTTPException(status_code=500, detail="Error getting visit count") from e


@router.post("")
async def add_visit() -> dict:
    """Increment the visit counter and return the new count"""
    try:
        return {"count": await increment_visit_count()}
    except DATABASE_ERRORS as e:
        logger.error(f"Error incrementing visit count: {e}")
        raise HTTPException(status_code=500, detail="Error incrementing visit count") from e
