"""
Pytest configuration for travel recommendation tests.

Environment is set at import time so the config module sees it before any
test module imports the package.
"""
import asyncio
import copy
import json
import os

import pytest

os.environ["ENVIRONMENT"] = "testing"
os.environ["PRELOAD_CATALOG"] = "false"
os.environ["CATALOG_BASE_URL"] = "http://catalog.test/"


SAMPLE_CATALOG = {
    "countries": [
        {
            "name": "Japan",
            "cities": [
                {"name": "Tokyo", "description": "A bustling metropolis.", "imageUrl": "tokyo.jpg"},
                {"name": "Kyoto", "description": "Historic temples and gardens.", "imageUrl": "kyoto.jpg"},
            ],
        },
        {
            "name": "Brazil",
            "cities": [
                {"name": "Rio de Janeiro", "description": "Carnival and a hidden waterfall.", "imageUrl": "rio.jpg"},
            ],
        },
    ],
    "temples": [
        {"name": "Angkor Wat", "description": "The largest religious monument.", "imageUrl": "angkor.jpg"},
    ],
    "beaches": [
        {"name": "Bora Bora", "description": "Turquoise water.", "imageUrl": "bora.jpg"},
        {"name": "Copacabana", "description": "Famous sand in Rio.", "imageUrl": ""},
    ],
}


class FakeSession:
    """Stands in for aiohttp.ClientSession, counting GET requests."""

    class Resp:
        def __init__(self, status, payload, reason="OK", delay=0):
            self.status = status
            self.reason = reason
            self._payload = payload
            self._delay = delay

        async def __aenter__(self):
            if self._delay:
                await asyncio.sleep(self._delay)
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def text(self):
            if isinstance(self._payload, str):
                return self._payload
            return json.dumps(self._payload)

    def __init__(self, payload=None, status=200, reason="OK", delay=0):
        self.payload = payload
        self.status = status
        self.reason = reason
        self.delay = delay
        self.calls = []

    def get(self, url, headers=None, timeout=None, params=None):
        self.calls.append({"url": url, "headers": headers})
        return FakeSession.Resp(self.status, self.payload, self.reason, self.delay)


@pytest.fixture
def sample_catalog():
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def fake_session(sample_catalog):
    return FakeSession(sample_catalog)
