import asyncio

from fastapi import APIRouter, Depends, HTTPException

from business.search_pizzerias import search_pizzerias_page
from integrations.google_places import GooglePlacesClient
from models.pizzeria import SearchPayload, SearchResponse
from utils.constants import SEARCH_TIMEOUT_SECONDS
from utils.dependencies import get_places_client
from utils.logging import logger

router = APIRouter(prefix="/api", tags=["search"])


def _parse_page(page: int | str | None) -> int:
    if page is None or page == "":
        return 1
    try:
        number = int(page)
    except ValueError as e:
        raise HTTPException(status_code=400, detail="Page must be a number") from e
    if number < 1:
        raise HTTPException(status_code=400, detail="Page must be 1 or greater")
    return number


@router.post("/search", response_model=SearchResponse, response_model_exclude_none=True)
async def search_pizzerias(
    payload: SearchPayload, places: GooglePlacesClient = Depends(get_places_client)
) -> SearchResponse:
    """Get one page of pizzerias for a keyword and city"""
    if not payload.keyword or not payload.city:
        raise HTTPException(status_code=400, detail="Keyword and city are required")
    page = _parse_page(payload.page)

    logger.info(f"Searching {payload.keyword!r} in {payload.city!r}, page {page}")
    try:
        return await asyncio.wait_for(
            search_pizzerias_page(places, payload.keyword, payload.city, page), timeout=SEARCH_TIMEOUT_SECONDS
        )
    except asyncio.TimeoutError as e:
        logger.error(f"Search for {payload.keyword!r} in {payload.city!r} timed out")
        raise HTTPException(status_code=504, detail="Search timed out") from e
