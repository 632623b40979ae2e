from xml.etree import ElementTree

from models.reference import ReferenceData
from utils.csv_parser import get_all_combinations, get_provinces

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _add_url(urlset: ElementTree.Element, loc: str, changefreq: str, priority: str) -> None:
    url = ElementTree.SubElement(urlset, "url")
    ElementTree.SubElement(url, "loc").text = loc
    ElementTree.SubElement(url, "changefreq").text = changefreq
    ElementTree.SubElement(url, "priority").text = priority


def build_sitemap(reference: ReferenceData, base_url: str) -> str:
    """Sitemap with the home page, every province, city and keyword x city page"""
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    _add_url(urlset, base_url, "daily", "1.0")
    for province in get_provinces(reference.cities):
        _add_url(urlset, f"{base_url}/provincia/{province.slug}", "weekly", "0.8")
    for city in reference.cities:
        _add_url(urlset, f"{base_url}/ciudad/{city.slug}", "weekly", "0.8")
    for keyword, city in get_all_combinations(reference):
        _add_url(urlset, f"{base_url}/pizzerias/{keyword.slug}/{city.slug}", "weekly", "0.9")

    ElementTree.indent(urlset, space="  ")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ElementTree.tostring(urlset, encoding="unicode")
