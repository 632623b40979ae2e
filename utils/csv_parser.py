import csv
import re
import unicodedata
from pathlib import Path

from models.reference import City, Keyword, Province, ReferenceData
from utils.constants import CITIES_CSV, CSV_SUBDIR, DATA_DIR, KEYWORDS_CSV
from utils.logging import logger


def slugify(text: str) -> str:
    """Accent-stripped, lowercased, hyphenated form of a display name"""
    text = unicodedata.normalize("NFD", str(text))
    text = "".join(char for char in text if not unicodedata.combining(char))
    text = re.sub(r"\s+", "-", text.lower().strip())
    text = re.sub(r"[^\w-]+", "", text, flags=re.ASCII)
    return re.sub(r"--+", "-", text)


def _find_csv(file_name: str, data_dir: Path) -> Path | None:
    """Look in <data_dir>/pizzerias first, then directly in <data_dir>"""
    for path in (data_dir / CSV_SUBDIR / file_name, data_dir / file_name):
        if path.is_file():
            return path
        logger.warning(f"{file_name} not found at {path}")
    return None


def _read_rows(file_name: str, data_dir: Path) -> list[list[str]]:
    path = _find_csv(file_name, data_dir)
    if not path:
        logger.error(f"{file_name} not found, continuing with no rows")
        return []
    with path.open(encoding="utf-8", newline="") as f:
        rows = [row for row in csv.reader(f) if any(cell.strip() for cell in row)]
    # First row is the header.
    return rows[1:]


def parse_cities(rows: list[list[str]]) -> list[City]:
    cities = []
    for row in rows:
        if len(row) < 3:
            continue
        id_city, name, province = (cell.strip() for cell in row[:3])
        population = row[3].strip() if len(row) > 3 else ""
        if not (id_city.isdigit() and name and province):
            logger.debug(f"Skipping invalid city row: {row}")
            continue
        cities.append(City(id=int(id_city), name=name, province=province, population=population, slug=slugify(name)))
    return cities


def parse_keywords(rows: list[list[str]]) -> list[Keyword]:
    keywords = []
    for row in rows:
        if len(row) < 2:
            logger.debug(f"Skipping invalid keyword row: {row}")
            continue
        # Accepts both "7" and "#7" ids; the name may itself contain commas.
        id_keyword = re.sub(r"\D", "", row[0])
        name = ",".join(row[1:]).strip()
        if id_keyword and name:
            keywords.append(Keyword(id=int(id_keyword), name=name, slug=slugify(name)))
    return keywords


def parse_cities_csv(data_dir: str | Path = DATA_DIR) -> list[City]:
    cities = parse_cities(_read_rows(CITIES_CSV, Path(data_dir)))
    logger.info(f"Parsed {len(cities)} cities")
    return cities


def parse_keywords_csv(data_dir: str | Path = DATA_DIR) -> list[Keyword]:
    keywords = parse_keywords(_read_rows(KEYWORDS_CSV, Path(data_dir)))
    logger.info(f"Parsed {len(keywords)} keywords")
    return keywords


def load_reference_data(data_dir: str | Path = DATA_DIR) -> ReferenceData:
    return ReferenceData(cities=parse_cities_csv(data_dir), keywords=parse_keywords_csv(data_dir))


def get_provinces(cities: list[City]) -> list[Province]:
    """Group cities by province, keeping the order in which provinces first appear"""
    provinces: dict[str, Province] = {}
    for city in cities:
        if city.province not in provinces:
            provinces[city.province] = Province(name=city.province, slug=slugify(city.province))
        provinces[city.province].cities.append(city)
    return list(provinces.values())


def get_all_combinations(reference: ReferenceData) -> list[tuple[Keyword, City]]:
    return [(keyword, city) for keyword in reference.keywords for city in reference.cities]
