from fastapi import APIRouter, Depends, Response

from business.sitemap import build_sitemap
from models.reference import City, Keyword, ReferenceData
from utils.constants import BASE_URL
from utils.dependencies import get_reference_data

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/cities")
async def get_cities(reference: ReferenceData = Depends(get_reference_data)) -> list[City]:
    """Get every city loaded from cities.csv"""
    return reference.cities


@router.get("/keywords")
async def get_keywords(reference: ReferenceData = Depends(get_reference_data)) -> list[Keyword]:
    """Get every pizza style loaded from keywords.csv"""
    return reference.keywords


@router.get("/sitemap.xml")
async def get_sitemap(reference: ReferenceData = Depends(get_reference_data)) -> Response:
    return Response(content=build_sitemap(reference, BASE_URL), media_type="application/xml")
