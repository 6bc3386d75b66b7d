#!/usr/bin/env python3
"""Search the travel recommendation catalog from a terminal

Usage:
  python -m travel_recommendation.scripts.search_cli "beach"
  python -m travel_recommendation.scripts.search_cli japan --base-url http://localhost:5000/
  python -m travel_recommendation.scripts.search_cli temple --json

Prints the result panel: either its message or one block per card.
"""
import argparse
import asyncio
import json
from urllib.parse import urljoin

from travel_recommendation.config import get_config, setup_logging
from travel_recommendation.providers.catalog_loader import CatalogLoader
from travel_recommendation.src.controller import InteractionController, QueryInput
from travel_recommendation.src.renderer import MemoryPanel, ResultRenderer


def format_panel(panel):
    lines = []
    for message in panel.messages:
        lines.append(message)
    for i, card in enumerate(panel.cards, 1):
        lines.append(f"\n{i}. {card.title}")
        lines.append(f"   {card.label}")
        if card.description:
            lines.append(f"   {card.description}")
        if card.image_url:
            lines.append(f"   image: {card.image_url}")
    return "\n".join(lines)


async def run(query, url):
    panel = MemoryPanel()
    controller = InteractionController(
        CatalogLoader(url=url),
        ResultRenderer(lambda: panel),
        QueryInput(query),
    )
    await controller.handle_search()
    return panel


def main(argv=None):
    catalog_config = get_config().catalog_config
    parser = argparse.ArgumentParser(description="Search travel recommendations.")
    parser.add_argument('query', help='Keyword (beach, temple, country) or free text')
    parser.add_argument('--base-url', default=catalog_config.base_url, help='Where the catalog is served from')
    parser.add_argument('--json', action='store_true', help='Print cards as JSON items instead of text')
    args = parser.parse_args(argv)

    setup_logging()
    panel = asyncio.run(run(args.query, urljoin(args.base_url, catalog_config.path)))

    if args.json:
        print(json.dumps({
            'items': [card.item.to_dict() for card in panel.cards],
            'message': panel.messages[0] if panel.messages else '',
        }, indent=2, ensure_ascii=False))
    else:
        print(format_panel(panel))


if __name__ == "__main__":
    main()
