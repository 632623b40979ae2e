import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "pizzerias")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")
BASE_URL = os.getenv("BASE_URL", "https://pizzerias-argentina.vercel.app").rstrip("/")
DATA_DIR = os.getenv("DATA_DIR", os.getcwd())
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEARCH_TIMEOUT_SECONDS = float(os.getenv("SEARCH_TIMEOUT_SECONDS", "25"))

PLACES_API_URL = "https://places.googleapis.com/v1/places:searchText"
PLACES_FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName",
        "places.formattedAddress",
        "places.rating",
        "places.userRatingCount",
        "places.priceLevel",
        "places.types",
        "places.internationalPhoneNumber",
        "places.currentOpeningHours",
        "places.googleMapsUri",
        "places.websiteUri",
        "nextPageToken",
    ]
)
PLACES_LANGUAGE_CODE = "es"
PLACES_PAGE_SIZE = 20
PLACES_MAX_PAGES = 3
PLACES_TIMEOUT_SECONDS = 10.0

PAGE_SIZE = 10

CACHE_COLLECTION = "cache"
COMPLETE_CACHE_PREFIX = "complete_"
PAGE_CACHE_TTL = timedelta(hours=1)
COMPLETE_CACHE_TTL = timedelta(days=7)
CACHE_INDEX_TTL_SECONDS = int(COMPLETE_CACHE_TTL.total_seconds())

CITIES_CSV = "cities.csv"
KEYWORDS_CSV = "keywords.csv"
CSV_SUBDIR = "pizzerias"
