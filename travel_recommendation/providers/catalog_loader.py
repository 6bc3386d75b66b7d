"""Catalog loading and the process-wide catalog cache.

The catalog is fetched over HTTP at most once per process. ``CatalogCache``
is a single slot written once; ``CatalogLoader`` serializes concurrent loads so
callers racing on a cold cache share one fetch.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from travel_recommendation.config import get_config
from .base import Catalog, LoadError
from .utils import fetch_json

logger = logging.getLogger(__name__)

_EMPTY = object()


class CatalogCache:
    """Single-slot holder for the fetched catalog.

    Empty at startup. The first ``store`` wins and later stores return the
    value already held. Nothing invalidates it except ``reset``, which exists
    for tests.
    """

    def __init__(self):
        self._value = _EMPTY

    @property
    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def get(self) -> Optional[Catalog]:
        return None if self._value is _EMPTY else self._value

    def store(self, catalog: Catalog) -> Catalog:
        if self._value is _EMPTY:
            self._value = catalog
        return self._value

    def reset(self) -> None:
        self._value = _EMPTY


def _describe(catalog) -> str:
    if not isinstance(catalog, dict):
        return f"non-object document ({type(catalog).__name__})"
    countries = catalog.get("countries")
    counts = {
        "countries": len(countries) if isinstance(countries, list) else 0,
        "temples": len(catalog["temples"]) if isinstance(catalog.get("temples"), list) else 0,
        "beaches": len(catalog["beaches"]) if isinstance(catalog.get("beaches"), list) else 0,
    }
    return ", ".join(f"{k}={v}" for k, v in counts.items())


class CatalogLoader:
    """Fetches the catalog once and serves it from the cache afterwards."""

    def __init__(
        self,
        url: Optional[str] = None,
        cache: Optional[CatalogCache] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
    ):
        catalog_config = get_config().catalog_config
        self.url = url or catalog_config.url
        self.cache = cache if cache is not None else CatalogCache()
        self.session = session
        self.timeout = timeout if timeout is not None else catalog_config.timeout
        self._lock = asyncio.Lock()

    async def load(self) -> Catalog:
        """Return the catalog, fetching it on first use.

        Raises:
            LoadError: If the fetch fails; the cache stays empty so the next
                call retries.
        """
        if not self.cache.is_empty:
            return self.cache.get()

        async with self._lock:
            # Another caller may have filled the cache while we waited.
            if not self.cache.is_empty:
                return self.cache.get()
            try:
                catalog = await fetch_json(self.url, timeout=self.timeout, session=self.session)
            except LoadError as e:
                logger.error("Catalog load failed from %s: %s", self.url, e)
                raise
            catalog = self.cache.store(catalog)

        logger.info("Travel recommendation data loaded from %s (%s)", self.url, _describe(catalog))
        logger.debug("Catalog document: %r", catalog)
        return catalog
