import json

import pytest

from travel_recommendation.providers.catalog_loader import CatalogLoader
from travel_recommendation.scripts import search_cli
from travel_recommendation.src.renderer import MemoryPanel, ResultRenderer
from travel_recommendation.src.normalizer import Item


@pytest.fixture
def offline_cli(monkeypatch, sample_catalog):
    async def load(self):
        return sample_catalog

    monkeypatch.setattr(CatalogLoader, "load", load)


def test_format_panel_lists_cards():
    panel = MemoryPanel()
    ResultRenderer(lambda: panel).render_results([
        Item(category="Country", country="Japan", name="Tokyo", description="Big", image_url="t.jpg"),
    ])
    text = search_cli.format_panel(panel)
    assert "1. Tokyo" in text
    assert "Country • Japan" in text
    assert "image: t.jpg" in text


def test_main_prints_cards(offline_cli, capsys):
    search_cli.main(["temple"])
    out = capsys.readouterr().out
    assert "Angkor Wat" in out


def test_main_prints_json_message(offline_cli, capsys):
    search_cli.main(["atlantis", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"items": [], "message": "No recommendations found."}
