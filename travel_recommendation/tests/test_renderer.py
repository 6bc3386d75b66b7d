from travel_recommendation.src.normalizer import Item
from travel_recommendation.src.renderer import Card, MemoryPanel, ResultRenderer

TOKYO = Item(category="Country", country="Japan", name="Tokyo", description="Big city", image_url="tokyo.jpg")
ANGKOR = Item(category="Temple", country="", name="Angkor Wat", description="", image_url="")
BLANK = Item(category="Beach", country="", name="", description="", image_url="")


class PanelFactory:
    def __init__(self, panel):
        self.panel = panel
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.panel


def test_card_label_with_country():
    assert Card.from_item(TOKYO).label == "Country • Japan"


def test_card_label_without_country():
    assert Card.from_item(ANGKOR).label == "Temple"


def test_card_defaults_for_empty_fields():
    card = Card.from_item(BLANK)
    assert card.title == "Untitled"
    assert card.description == ""
    assert card.image_url is None
    assert card.image_alt == "recommendation image"


def test_dropping_one_image_keeps_the_others():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_results([TOKYO, TOKYO])

    panel.cards[0].drop_image()

    assert panel.cards[0].image_url is None
    assert panel.cards[1].image_url == "tokyo.jpg"


def test_visit_only_logs(caplog):
    card = Card.from_item(TOKYO)
    with caplog.at_level("INFO", logger="travel_recommendation.src.renderer"):
        card.visit()
    assert "Visit clicked" in caplog.text
    assert "Tokyo" in caplog.text
    assert card == Card.from_item(TOKYO)


def test_render_results_in_order():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_results([TOKYO, ANGKOR])
    assert [c.title for c in panel.cards] == ["Tokyo", "Angkor Wat"]
    assert panel.messages == []


def test_message_replaces_cards():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_results([TOKYO])
    renderer.render_message("No recommendations found.")
    assert panel.cards == []
    assert panel.messages == ["No recommendations found."]


def test_results_replace_message():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_message("Please enter a valid search query.")
    renderer.render_results([ANGKOR])
    assert panel.messages == []
    assert len(panel.cards) == 1


def test_rendering_empty_list_twice_leaves_no_cards():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_results([TOKYO, ANGKOR])
    renderer.render_results([])
    renderer.render_results([])
    assert panel.is_blank


def test_panel_created_lazily_once():
    factory = PanelFactory(MemoryPanel())
    renderer = ResultRenderer(factory)
    assert factory.calls == 0

    renderer.render_message("a")
    renderer.render_results([TOKYO])
    renderer.render_message("b")

    assert factory.calls == 1
    assert renderer.panel is factory.panel


def test_clear_does_not_create_panel():
    factory = PanelFactory(MemoryPanel())
    renderer = ResultRenderer(factory)
    renderer.clear()
    assert factory.calls == 0
    assert renderer.panel is None


def test_clear_empties_existing_panel():
    panel = MemoryPanel()
    renderer = ResultRenderer(lambda: panel)
    renderer.render_results([TOKYO])
    renderer.clear()
    assert panel.is_blank


def test_missing_container_makes_rendering_a_noop():
    renderer = ResultRenderer(lambda: None)
    renderer.render_message("hello")
    renderer.render_results([TOKYO])
    renderer.clear()
    assert renderer.panel is None
