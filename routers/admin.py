from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from databases.mongo.cache import recreate_cache_collection
from utils.dependencies import get_database
from utils.logging import logger

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/recreate-cache")
async def recreate_cache(database: AsyncIOMotorDatabase = Depends(get_database)) -> JSONResponse:
    """Drop the cache collection and recreate it with a unique key index and a TTL index"""
    logger.info("Attempting to recreate cache collection...")
    try:
        await recreate_cache_collection(database)
    except PyMongoError as e:
        logger.error(f"Error recreating cache collection: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Error recreating cache collection", "details": str(e)},
        )
    return JSONResponse(content={"success": True, "message": "Cache collection recreated successfully"})
