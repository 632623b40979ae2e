from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpeningHours(CamelModel):
    weekday_text: list[str] | None = None
    open_now: bool | None = None


class Pizzeria(CamelModel):
    id: str
    name: str
    address: str
    rating: float | None = None
    user_ratings_total: int | None = None
    price_level: str | int | None = None
    types: list[str] | None = None
    phone_number: str | None = None
    website_uri: str | None = None
    opening_hours: OpeningHours | None = None
    google_maps_url: str | None = None


class SearchResult(CamelModel):
    """One upstream page of results"""

    pizzerias: list[Pizzeria] = Field(default_factory=list)
    total_results: int = 0
    next_page_token: str | None = None


class CompleteSearchResult(CamelModel):
    """Every upstream page for a (keyword, city) pair, accumulated"""

    pizzerias: list[Pizzeria] = Field(default_factory=list)
    total_results: int = 0
    page_tokens: dict[int, str] = Field(default_factory=dict)
    max_pages: int = 0


class SearchPayload(CamelModel):
    keyword: str | None = None
    city: str | None = None
    page: int | str | None = 1


class SearchResponse(CamelModel):
    pizzerias: list[Pizzeria] = Field(default_factory=list)
    total_results: int = 0
    next_page_token: str | None = None
    has_next_page: bool = False
    max_pages: int = 0
