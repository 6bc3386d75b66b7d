"""
Shared HTTP utilities for provider modules.
"""
import asyncio
import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import aiohttp

from .base import LoadError

logger = logging.getLogger(__name__)

# Always go to the network, never to an intermediate cache.
NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


@asynccontextmanager
async def get_session(session: Optional[aiohttp.ClientSession] = None):
    """Context manager for aiohttp session handling.

    If session is provided, yields it.
    If not, creates a new session and closes it after use.
    """
    if session is not None:
        yield session
    else:
        async with aiohttp.ClientSession() as new_session:
            yield new_session


async def fetch_json(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 10.0,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """
    GET a JSON document, raising LoadError on any failure.

    Args:
        url: The URL to request
        headers: Request headers, defaults to NO_STORE_HEADERS
        timeout: Request timeout in seconds
        session: Optional aiohttp session to reuse

    Returns:
        The parsed JSON body

    Raises:
        LoadError: non-2xx status, unparsable body, or transport failure
    """
    try:
        async with get_session(session) as sess:
            async with sess.get(
                url,
                headers=headers if headers is not None else NO_STORE_HEADERS,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                if not (200 <= resp.status < 300):
                    raise LoadError.from_status(url, resp.status, resp.reason)
                try:
                    document = json.loads(await resp.text())
                except ValueError as e:
                    raise LoadError(
                        f"Malformed JSON in response from {url}: {e}",
                        url=url,
                        status=resp.status,
                        reason=resp.reason,
                    ) from e
                if document is None:
                    raise LoadError(
                        f"Empty JSON document in response from {url}",
                        url=url,
                        status=resp.status,
                        reason=resp.reason,
                    )
                return document
    except aiohttp.ClientError as e:
        raise LoadError(f"HTTP GET {url} failed: {e}", url=url) from e
    except asyncio.TimeoutError as e:
        raise LoadError(f"HTTP GET {url} timed out after {timeout}s", url=url) from e
