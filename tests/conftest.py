"""
Pytest configuration and shared fixtures.

MongoDB is replaced by mongomock-motor and the Places API by FakePlacesClient,
so the whole suite runs without network access.
"""

import asyncio
from pathlib import Path

import httpx
import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from app import app
from databases.mongo import MODELS
from integrations.google_places import PlacesSearchError
from models.pizzeria import Pizzeria, SearchResult
from utils.csv_parser import load_reference_data

DATA_DIR = Path(__file__).resolve().parent.parent


def make_pizzerias(count: int, start: int = 0) -> list[Pizzeria]:
    return [
        Pizzeria(id=f"place-{i}", name=f"Pizzería {i}", address=f"Calle {i}, Córdoba", rating=4.5)
        for i in range(start, start + count)
    ]


def make_pages(*sizes: int) -> list[SearchResult]:
    """Upstream pages of the given sizes, chained by tokens token-2, token-3, ..."""
    pages, start = [], 0
    for number, size in enumerate(sizes, start=1):
        token = f"token-{number + 1}" if number < len(sizes) else None
        pages.append(SearchResult(pizzerias=make_pizzerias(size, start), total_results=size, next_page_token=token))
        start += size
    return pages


class FakePlacesClient:
    """Replays canned upstream pages in order, recording the token of each call"""

    def __init__(self, pages: list[SearchResult | Exception], delay: float = 0):
        self.pages = pages
        self.delay = delay
        self.calls: list[str | None] = []

    async def search_text(self, keyword: str, city: str, page_token: str | None = None) -> SearchResult:
        self.calls.append(page_token)
        if self.delay:
            await asyncio.sleep(self.delay)
        if len(self.calls) > len(self.pages):
            raise PlacesSearchError("No more canned pages")
        page = self.pages[len(self.calls) - 1]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
async def database():
    db = AsyncMongoMockClient()["pizzerias_test"]
    await init_beanie(database=db, document_models=MODELS)
    yield db


@pytest.fixture
def reference_data():
    return load_reference_data(DATA_DIR)


@pytest.fixture
def places():
    return FakePlacesClient(make_pages(20, 20, 5))


@pytest.fixture
async def client(database, reference_data, places):
    app.state.reference_data = reference_data
    app.state.database = database
    app.state.places_client = places
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
