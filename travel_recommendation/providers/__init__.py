"""
Catalog providers: HTTP fetching and the process-wide catalog cache.
"""

from .base import Catalog, LoadError, TravelRecommendationError
from .catalog_loader import CatalogCache, CatalogLoader

__all__ = [
    "Catalog",
    "CatalogCache",
    "CatalogLoader",
    "LoadError",
    "TravelRecommendationError",
]
