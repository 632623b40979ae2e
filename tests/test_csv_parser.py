import pytest

from tests.conftest import DATA_DIR
from utils.csv_parser import (
    get_all_combinations,
    get_provinces,
    load_reference_data,
    parse_cities,
    parse_keywords,
    slugify,
)


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Córdoba", "cordoba"),
        ("San Carlos de Bariloche", "san-carlos-de-bariloche"),
        ("  Pizza   a la piedra! ", "pizza-a-la-piedra"),
        ("Fugazzeta / Fainá", "fugazzeta-faina"),
        ("Ñandú", "nandu"),
        ("Pizza sin TACC", "pizza-sin-tacc"),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug


def test_parse_cities_builds_slugged_records():
    cities = parse_cities([["2", " Río Cuarto ", "Córdoba", "163048"], ["3", "Rosario", "Santa Fe"]])

    assert [c.model_dump() for c in cities] == [
        {"id": 2, "name": "Río Cuarto", "province": "Córdoba", "population": "163048", "slug": "rio-cuarto"},
        {"id": 3, "name": "Rosario", "province": "Santa Fe", "population": "", "slug": "rosario"},
    ]


def test_parse_cities_skips_incomplete_rows():
    rows = [["1", "Salta"], ["", "Salta", "Salta"], ["x", "Salta", "Salta"], ["4", "", "Salta"], ["5", "Salta", "Salta"]]

    assert [c.id for c in parse_cities(rows)] == [5]


def test_parse_keywords_strips_id_and_keeps_commas_in_name():
    keywords = parse_keywords([["#3", "Muzza", " extra queso"], ["4", "Fainá"], ["sin-id"], ["#", "Nada"]])

    assert [(k.id, k.name, k.slug) for k in keywords] == [
        (3, "Muzza, extra queso", "muzza-extra-queso"),
        (4, "Fainá", "faina"),
    ]


def test_load_reference_data_from_bundled_csv():
    reference = load_reference_data(DATA_DIR)

    assert len(reference.cities) == 15
    assert len(reference.keywords) == 10
    assert reference.find_city("cordoba").province == "Córdoba"
    assert reference.find_keyword("pizza-sin-tacc").name == "Pizza sin TACC"
    assert reference.find_city("atlantis") is None


def test_load_reference_data_falls_back_to_data_dir_root(tmp_path):
    (tmp_path / "cities.csv").write_text("id,name,province,population\n1,Neuquén,Neuquén,341301\n", encoding="utf-8")

    reference = load_reference_data(tmp_path)

    assert [c.slug for c in reference.cities] == ["neuquen"]
    assert reference.keywords == []


def test_get_provinces_groups_in_first_seen_order():
    cities = parse_cities([["1", "La Plata", "Buenos Aires"], ["2", "Salta", "Salta"], ["3", "Mar del Plata", "Buenos Aires"]])

    provinces = get_provinces(cities)

    assert [(p.slug, [c.name for c in p.cities]) for p in provinces] == [
        ("buenos-aires", ["La Plata", "Mar del Plata"]),
        ("salta", ["Salta"]),
    ]


def test_get_all_combinations(reference_data):
    assert len(get_all_combinations(reference_data)) == 150
