"""
Quart host for the travel recommendation widget.
"""

import asyncio
import logging
import os
from pathlib import Path

import aiohttp
from quart import Quart
from quart_cors import cors

from travel_recommendation.config import get_config, setup_logging
from travel_recommendation.providers.base import LoadError
from travel_recommendation.providers.catalog_loader import CatalogLoader
from .routes import register_blueprints

PACKAGE_DIR = Path(__file__).resolve().parent.parent

config = get_config()
setup_logging()
logger = logging.getLogger(__name__)

app = Quart(
    __name__,
    static_folder=str(PACKAGE_DIR / "static"),
    static_url_path="",
    template_folder=str(PACKAGE_DIR / "templates"),
)

cors(app, allow_origin=config.cors_origin, allow_methods=["GET", "POST", "OPTIONS"])

# Process-wide catalog loader; its cache lives as long as the app.
catalog_loader = CatalogLoader()

aiohttp_session: aiohttp.ClientSession | None = None
preload_task: asyncio.Task | None = None


async def preload_catalog():
    """Warm the catalog cache; a failure only means the first search retries."""
    try:
        await catalog_loader.load()
    except LoadError:
        logger.warning("Initial catalog load failed; will retry on first search")
    except Exception:
        logger.exception("Initial catalog load failed unexpectedly")


@app.before_serving
async def startup():
    global aiohttp_session, preload_task
    aiohttp_session = aiohttp.ClientSession(headers={"User-Agent": "travel-recommendation"})
    catalog_loader.session = aiohttp_session
    if config.preload_catalog:
        preload_task = asyncio.create_task(preload_catalog())


@app.after_serving
async def shutdown():
    global aiohttp_session, preload_task
    if preload_task is not None and not preload_task.done():
        preload_task.cancel()
    preload_task = None
    catalog_loader.session = None
    if aiohttp_session:
        await aiohttp_session.close()
        aiohttp_session = None


register_blueprints(app)


if __name__ == "__main__":
    port = int(os.getenv("PORT") or os.getenv("QUART_PORT") or 5000)
    app.run(host="0.0.0.0", port=port, debug=config.debug)
