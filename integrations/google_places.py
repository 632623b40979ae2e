import httpx

from models.pizzeria import OpeningHours, Pizzeria, SearchResult
from utils.constants import (
    GOOGLE_API_KEY,
    PLACES_API_URL,
    PLACES_FIELD_MASK,
    PLACES_LANGUAGE_CODE,
    PLACES_PAGE_SIZE,
    PLACES_TIMEOUT_SECONDS,
)
from utils.logging import logger


class PlacesSearchError(Exception):
    """The Places API call failed or returned something we cannot read"""


def build_search_query(keyword: str, city: str) -> str:
    return f"Pizzerias de {keyword} en {city}"


class GooglePlacesClient:
    """Text search against the Places API.

    The underlying httpx client is owned by the application lifespan, which opens it
    at startup and closes it at shutdown.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str = GOOGLE_API_KEY):
        self.http_client = http_client
        self.api_key = api_key

    @classmethod
    def create(cls, api_key: str = GOOGLE_API_KEY) -> "GooglePlacesClient":
        if not api_key:
            logger.warning("GOOGLE_API_KEY is not set, pizzeria searches will return no results")
        return cls(httpx.AsyncClient(timeout=PLACES_TIMEOUT_SECONDS), api_key)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def search_text(self, keyword: str, city: str, page_token: str | None = None) -> SearchResult:
        """Fetch one page of pizzerias of a style in a city"""
        body = {
            "textQuery": build_search_query(keyword, city),
            "languageCode": PLACES_LANGUAGE_CODE,
            "pageSize": PLACES_PAGE_SIZE,
        }
        if page_token:
            body["pageToken"] = page_token

        logger.info(f"Querying Places API with {body['textQuery']!r} (token: {page_token or 'none'})")
        try:
            response = await self.http_client.post(
                PLACES_API_URL,
                json=body,
                headers={"X-Goog-Api-Key": self.api_key, "X-Goog-FieldMask": PLACES_FIELD_MASK},
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise PlacesSearchError(f"Places search failed for {body['textQuery']!r}: {e}") from e

        if not isinstance(data, dict):
            raise PlacesSearchError(f"Unexpected Places response: {data!r}")

        pizzerias = [_to_pizzeria(place) for place in data.get("places", [])]
        return SearchResult(
            pizzerias=pizzerias,
            total_results=len(pizzerias),
            next_page_token=data.get("nextPageToken") or None,
        )


def _to_pizzeria(place: dict) -> Pizzeria:
    """Normalize a Places API record"""
    hours = place.get("currentOpeningHours")
    return Pizzeria(
        id=place.get("id", ""),
        name=(place.get("displayName") or {}).get("text") or "Sin nombre",
        address=place.get("formattedAddress") or "Sin dirección",
        rating=place.get("rating"),
        user_ratings_total=place.get("userRatingCount"),
        price_level=place.get("priceLevel"),
        types=place.get("types"),
        phone_number=place.get("internationalPhoneNumber"),
        website_uri=place.get("websiteUri"),
        opening_hours=(
            OpeningHours(
                weekday_text=hours.get("weekdayDescriptions") or hours.get("weekdayText"),
                open_now=hours.get("openNow"),
            )
            if hours
            else None
        ),
        google_maps_url=place.get("googleMapsUri"),
    )
