from math import ceil

from databases.mongo.cache import get_cached_data, set_cached_data
from integrations.google_places import GooglePlacesClient, PlacesSearchError
from models.pizzeria import CompleteSearchResult, SearchResponse, SearchResult
from utils.constants import COMPLETE_CACHE_PREFIX, PAGE_CACHE_TTL, PAGE_SIZE, PLACES_MAX_PAGES
from utils.csv_parser import slugify
from utils.logging import logger


def page_cache_key(keyword: str, city: str, page: int, page_token: str | None = None) -> str:
    # Slugs can contain "_" but never ":".
    return f"page_{slugify(keyword)}:{slugify(city)}:{page}:{page_token or ''}"


def complete_cache_key(keyword: str, city: str) -> str:
    return f"{COMPLETE_CACHE_PREFIX}{slugify(keyword)}:{slugify(city)}"


async def fetch_search_page(
    places: GooglePlacesClient, keyword: str, city: str, page: int, page_token: str | None = None
) -> SearchResult:
    """Get a single upstream page, going through the short-lived page cache"""
    key = page_cache_key(keyword, city, page, page_token)
    cached = await get_cached_data(key)
    if cached is not None:
        return SearchResult.model_validate(cached)

    result = await places.search_text(keyword, city, page_token)
    await set_cached_data(key, result.model_dump(mode="json", by_alias=True))
    return result


async def get_complete_results(places: GooglePlacesClient, keyword: str, city: str) -> CompleteSearchResult:
    """Get every pizzeria for a keyword and city, assembling and caching the aggregate on a miss.

    Upstream pages are only reachable through the previous page's token, so they are
    fetched one after another until no token comes back or PLACES_MAX_PAGES is reached.
    """
    key = complete_cache_key(keyword, city)
    cached = await get_cached_data(key)
    if cached is not None:
        logger.info(f"Serving {key} from cache")
        return CompleteSearchResult.model_validate(cached)

    complete = CompleteSearchResult()
    page_token = None
    ttl = None
    for upstream_page in range(1, PLACES_MAX_PAGES + 1):
        try:
            result = await fetch_search_page(places, keyword, city, upstream_page, page_token)
        except PlacesSearchError as e:
            logger.error(f"Stopping pagination for {key} at page {upstream_page}: {e}")
            if upstream_page == 1:
                return complete
            # Partial aggregates are retried as soon as a token page would be.
            ttl = PAGE_CACHE_TTL
            break

        complete.pizzerias.extend(result.pizzerias)
        if page_token:
            complete.page_tokens[upstream_page] = page_token
        page_token = result.next_page_token
        if not page_token:
            break

    complete.total_results = len(complete.pizzerias)
    complete.max_pages = ceil(complete.total_results / PAGE_SIZE)
    logger.info(f"Assembled {key}: {complete.total_results} pizzerias over {complete.max_pages} pages")
    await set_cached_data(key, complete.model_dump(mode="json", by_alias=True), ttl=ttl)
    return complete


def slice_page(complete: CompleteSearchResult, page: int) -> SearchResponse:
    """Cut one display page out of an aggregate. Pages past the end come back empty."""
    start = (page - 1) * PAGE_SIZE
    has_next_page = page < complete.max_pages
    return SearchResponse(
        pizzerias=complete.pizzerias[start : start + PAGE_SIZE],
        total_results=complete.total_results,
        next_page_token=str(page + 1) if has_next_page else None,
        has_next_page=has_next_page,
        max_pages=complete.max_pages,
    )


async def search_pizzerias_page(places: GooglePlacesClient, keyword: str, city: str, page: int = 1) -> SearchResponse:
    """Get one display page of pizzerias of a style in a city"""
    if page < 1:
        raise ValueError(f"Page must be 1 or greater, got {page}")
    complete = await get_complete_results(places, keyword, city)
    return slice_page(complete, page)
