from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from business.search_pizzerias import search_pizzerias_page
from integrations.google_places import GooglePlacesClient
from models.reference import ReferenceData
from utils.constants import PAGE_SIZE
from utils.csv_parser import get_provinces, slugify
from utils.dependencies import get_places_client, get_reference_data
from utils.logging import logger

TEMPLATES = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")
RELATED_LINKS = 5

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _not_found(request: Request, message: str) -> Response:
    return TEMPLATES.TemplateResponse(
        request, "not_found.html", {"title": "Página no encontrada", "message": message}, status_code=404
    )


@router.get("/")
async def home_page(request: Request, reference: ReferenceData = Depends(get_reference_data)) -> Response:
    return TEMPLATES.TemplateResponse(
        request,
        "home.html",
        {
            "title": "Directorio de Pizzerías en Argentina",
            "provinces": get_provinces(reference.cities),
            "keywords": reference.keywords,
        },
    )


@router.get("/buscar")
async def search_page(
    request: Request,
    keyword: str | None = None,
    city: str | None = None,
    reference: ReferenceData = Depends(get_reference_data),
) -> Response:
    """Search form; once both a keyword and a city are picked, redirect to their page"""
    found_keyword = reference.find_keyword(keyword) if keyword else None
    found_city = reference.find_city(city) if city else None
    if found_keyword and found_city:
        return RedirectResponse(f"/pizzerias/{found_keyword.slug}/{found_city.slug}", status_code=303)

    return TEMPLATES.TemplateResponse(
        request,
        "search.html",
        {
            "title": "Buscar Pizzerías",
            "provinces": get_provinces(reference.cities),
            "keywords": reference.keywords,
            "selected_keyword": keyword,
            "selected_city": city,
        },
    )


@router.get("/provincia/{province_slug}")
async def province_page(
    request: Request, province_slug: str, reference: ReferenceData = Depends(get_reference_data)
) -> Response:
    province = next((p for p in get_provinces(reference.cities) if p.slug == province_slug), None)
    if not province:
        return _not_found(request, "No encontramos esa provincia.")
    return TEMPLATES.TemplateResponse(
        request,
        "province.html",
        {"title": f"Pizzerías en {province.name}", "province": province, "keywords": reference.keywords},
    )


@router.get("/ciudad/{city_slug}")
async def city_page(request: Request, city_slug: str, reference: ReferenceData = Depends(get_reference_data)) -> Response:
    city = reference.find_city(city_slug)
    if not city:
        return _not_found(request, "No encontramos esa ciudad.")
    return TEMPLATES.TemplateResponse(
        request,
        "city.html",
        {
            "title": f"Pizzerías en {city.name}, {city.province}",
            "city": city,
            "province_slug": slugify(city.province),
            "keywords": reference.keywords,
        },
    )


@router.get("/pizzerias/{keyword_slug}/{city_slug}")
async def keyword_city_page(
    request: Request,
    keyword_slug: str,
    city_slug: str,
    reference: ReferenceData = Depends(get_reference_data),
    places: GooglePlacesClient = Depends(get_places_client),
) -> Response:
    return await _render_results(request, reference, places, keyword_slug, city_slug, "1")


@router.get("/pizzerias/{keyword_slug}/{city_slug}/{page}")
async def keyword_city_paginated_page(
    request: Request,
    keyword_slug: str,
    city_slug: str,
    page: str,
    reference: ReferenceData = Depends(get_reference_data),
    places: GooglePlacesClient = Depends(get_places_client),
) -> Response:
    return await _render_results(request, reference, places, keyword_slug, city_slug, page)


async def _render_results(
    request: Request,
    reference: ReferenceData,
    places: GooglePlacesClient,
    keyword_slug: str,
    city_slug: str,
    page: str,
) -> Response:
    keyword = reference.find_keyword(keyword_slug)
    city = reference.find_city(city_slug)
    if not keyword or not city or not page.isdecimal() or int(page) < 1:
        return _not_found(request, "No se encontraron datos para esta búsqueda.")
    page_number = int(page)

    results = await search_pizzerias_page(places, keyword.name, city.name, page_number)
    if not results.pizzerias and page_number > 1:
        logger.info(f"No results for {keyword.slug}/{city.slug} page {page_number}")
        return _not_found(request, "No hay más pizzerías para esta búsqueda.")

    title = f"Las Mejores Pizzerías de {keyword.name} en {city.name}, {city.province}"
    if page_number > 1:
        title = f"{title} - Página {page_number}"
    return TEMPLATES.TemplateResponse(
        request,
        "results.html",
        {
            "title": title,
            "keyword": keyword,
            "city": city,
            "page": page_number,
            "page_size": PAGE_SIZE,
            "results": results,
            "related_cities": [c for c in reference.cities[:RELATED_LINKS] if c.id != city.id],
            "related_keywords": [k for k in reference.keywords[:RELATED_LINKS] if k.id != keyword.id],
        },
    )
