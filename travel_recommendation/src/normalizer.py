"""
Flatten the catalog's countries/temples/beaches into uniform Items.

Everything here is pure: the same catalog always yields the same items in
source order, and missing or wrong-typed fields become empty strings.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

COUNTRY = "Country"
TEMPLE = "Temple"
BEACH = "Beach"
PLACE = "Place"

CATEGORY_LABELS = {
    "temples": TEMPLE,
    "beaches": BEACH,
}


@dataclass(frozen=True)
class Item:
    """A searchable, displayable recommendation."""
    category: str
    country: str
    name: str
    description: str
    image_url: str

    def to_dict(self) -> Dict[str, str]:
        data = asdict(self)
        data["imageUrl"] = data.pop("image_url")
        return data


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _entries(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _field(entry: Any, key: str) -> str:
    if not isinstance(entry, dict):
        return ""
    return _text(entry.get(key))


def _collection(catalog: Any, key: str) -> List[Any]:
    if not isinstance(catalog, dict):
        return []
    return _entries(catalog.get(key))


def cities_from_countries(catalog: Any) -> List[Item]:
    """One Country item per city, carrying its country's name."""
    out = []
    for country in _collection(catalog, "countries"):
        country_name = _field(country, "name")
        cities = _entries(country.get("cities")) if isinstance(country, dict) else []
        for city in cities:
            out.append(Item(
                category=COUNTRY,
                country=country_name,
                name=_field(city, "name"),
                description=_field(city, "description"),
                image_url=_field(city, "imageUrl"),
            ))
    return out


def items_from_category(catalog: Any, key: str) -> List[Item]:
    """Items for a flat category such as ``temples`` or ``beaches``."""
    label = CATEGORY_LABELS.get(key, PLACE)
    return [
        Item(
            category=label,
            country="",
            name=_field(entry, "name"),
            description=_field(entry, "description"),
            image_url=_field(entry, "imageUrl"),
        )
        for entry in _collection(catalog, key)
    ]


def all_searchable_items(catalog: Any) -> List[Item]:
    """Cities, then temples, then beaches."""
    return (
        cities_from_countries(catalog)
        + items_from_category(catalog, "temples")
        + items_from_category(catalog, "beaches")
    )
