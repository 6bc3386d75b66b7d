"""
Search / clear wiring between the host, the catalog loader and the renderer.
"""
import logging
from dataclasses import dataclass

from travel_recommendation.providers.catalog_loader import CatalogLoader
from .renderer import ResultRenderer
from .search_engine import search

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong while loading recommendations."


@dataclass
class QueryInput:
    """The host's query text field."""
    value: str = ""


class InteractionController:
    """Runs the search and clear transitions.

    Every search or clear starts a new generation. A search whose catalog
    load finishes after a newer generation has started drops its result, so
    a slow search can never overwrite a later search or a clear.
    """

    def __init__(self, loader: CatalogLoader, renderer: ResultRenderer, query_input: QueryInput):
        self.loader = loader
        self.renderer = renderer
        self.query_input = query_input
        self._generation = 0

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def handle_search(self) -> None:
        generation = self._next_generation()
        query = self.query_input.value
        try:
            catalog = await self.loader.load()
            if generation != self._generation:
                logger.debug("Discarding stale search %d for %r", generation, query)
                return
            result = search(query, catalog)
            if result.message:
                self.renderer.render_message(result.message)
            else:
                self.renderer.render_results(result.items)
        except Exception:
            logger.exception("Search error for query %r", query)
            if generation == self._generation:
                self.renderer.render_message(GENERIC_FAILURE_MESSAGE)

    def handle_clear(self) -> None:
        self._next_generation()
        self.query_input.value = ""
        self.renderer.clear()
