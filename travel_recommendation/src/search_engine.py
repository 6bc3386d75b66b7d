"""
Keyword search over the catalog.

A query is routed by substring containment against a fixed, ordered list of
keywords; the first keyword found picks the result pool. Queries that hit no
keyword fall back to a substring scan over every item's text.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .normalizer import (
    Item,
    all_searchable_items,
    cities_from_countries,
    items_from_category,
)

EMPTY_QUERY_MESSAGE = "Please enter a valid search query."
NO_RESULTS_MESSAGE = "No recommendations found."


@dataclass
class SearchResult:
    """Items to show, or a message to show instead when ``message`` is set."""
    items: List[Item] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "message": self.message,
        }


# Evaluated in order; first contained keyword wins.
KEYWORD_ROUTES: Tuple[Tuple[str, Callable[[Any], List[Item]]], ...] = (
    ("beach", lambda catalog: items_from_category(catalog, "beaches")),
    ("temple", lambda catalog: items_from_category(catalog, "temples")),
    ("country", cities_from_countries),
)


def normalize_query(query: Any) -> str:
    return str(query if query is not None else "").strip().lower()


def _haystack(item: Item) -> str:
    return f"{item.name} {item.description} {item.country} {item.category}".strip().lower()


def full_text_matches(query: str, catalog: Any) -> List[Item]:
    """Items whose name, description, country or category contain ``query``."""
    return [item for item in all_searchable_items(catalog) if query in _haystack(item)]


def resolve_pool(query: str, catalog: Any) -> List[Item]:
    for keyword, resolver in KEYWORD_ROUTES:
        if keyword in query:
            return resolver(catalog)
    return full_text_matches(query, catalog)


def search(query: Any, catalog: Any) -> SearchResult:
    """Map a free-text query to a SearchResult.

    Empty queries and empty pools are ordinary results carrying a message,
    never exceptions.
    """
    q = normalize_query(query)
    if not q:
        return SearchResult(message=EMPTY_QUERY_MESSAGE)

    items = resolve_pool(q, catalog)
    if not items:
        return SearchResult(message=NO_RESULTS_MESSAGE)
    return SearchResult(items=items)
