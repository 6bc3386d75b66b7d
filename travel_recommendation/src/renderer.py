"""
Result panel rendering.

``ResultRenderer`` owns the draw cycle (clear, then draw) and talks to the
host only through ``RenderTarget``. Hosts supply the target lazily: the panel
factory runs on first render and its panel is reused afterwards. A factory
returning ``None`` means the host has no container, and rendering is a no-op.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .normalizer import Item

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"
DEFAULT_IMAGE_ALT = "recommendation image"


@dataclass
class Card:
    """Display model for one Item."""
    item: Item
    label: str
    title: str
    description: str
    image_url: Optional[str]
    image_alt: str

    @classmethod
    def from_item(cls, item: Item) -> "Card":
        label = f"{item.category} • {item.country}" if item.country else item.category
        return cls(
            item=item,
            label=label,
            title=item.name or UNTITLED,
            description=item.description or "",
            image_url=item.image_url or None,
            image_alt=item.name or DEFAULT_IMAGE_ALT,
        )

    def drop_image(self) -> None:
        """Called when the image fails to load; other cards keep theirs."""
        self.image_url = None

    def visit(self) -> None:
        """The card's action control. Logs only."""
        logger.info("Visit clicked: %s", self.item.to_dict())


class RenderTarget(ABC):
    """What a host panel must be able to do."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every message and card."""
        pass

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Append a single message block."""
        pass

    @abstractmethod
    def show_cards(self, cards: Sequence[Card]) -> None:
        """Append cards in order."""
        pass


class MemoryPanel(RenderTarget):
    """Panel that just remembers what it shows."""

    def __init__(self):
        self.messages: List[str] = []
        self.cards: List[Card] = []

    @property
    def is_blank(self) -> bool:
        return not self.messages and not self.cards

    def clear(self) -> None:
        self.messages = []
        self.cards = []

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def show_cards(self, cards: Sequence[Card]) -> None:
        self.cards.extend(cards)


class HtmlPanel(MemoryPanel):
    """Panel state handed to the page template, plus the element ids it uses."""

    element_id = "tr-results-panel"
    body_id = "tr-results-body"


class ResultRenderer:
    """Draws messages or result cards into a lazily created panel."""

    def __init__(self, panel_factory: Callable[[], Optional[RenderTarget]]):
        self._panel_factory = panel_factory
        self._panel: Optional[RenderTarget] = None

    @property
    def panel(self) -> Optional[RenderTarget]:
        return self._panel

    def ensure_panel(self) -> Optional[RenderTarget]:
        if self._panel is None:
            self._panel = self._panel_factory()
        return self._panel

    def render_message(self, text: str) -> None:
        panel = self.ensure_panel()
        if panel is None:
            return
        panel.clear()
        panel.show_message(text)

    def render_results(self, items: Sequence[Item]) -> None:
        panel = self.ensure_panel()
        if panel is None:
            return
        cards = [Card.from_item(item) for item in items]
        panel.clear()
        panel.show_cards(cards)

    def clear(self) -> None:
        # Clearing never creates the panel.
        if self._panel is not None:
            self._panel.clear()
