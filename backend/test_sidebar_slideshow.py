"""
test_sidebar_slideshow.py
──────────────────────────────────────────────────────────────────────────────
DetailPanel projection + callbacks, Slideshow wrap-around.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from unittest.mock import MagicMock

from modules.explorer.sidebar import DetailPanel
from modules.explorer.slideshow import Slideshow
from schemas.attraction import Attraction

NEWLANDS = Attraction(
    id=1,
    name="Newlands Stadium",
    description="The oldest rugby stadium in South Africa.",
    coordinates=(-33.9706, 18.4687),
    entrance_fee="R100",
    directions="Cape Town, Western Cape",
    images=("https://img/1.png", "https://img/2.png"),
    video="https://www.youtube.com/embed/sample-video1",
)
ELLIS = Attraction(id=2, name="Ellis Park Stadium", description="1995 final.",
                   coordinates=(-26.1979, 28.0625))


# ── DetailPanel ────────────────────────────────────────────────────────────────

def _panel():
    on_close, on_add, on_more = MagicMock(), MagicMock(), MagicMock()
    return DetailPanel(NEWLANDS, on_close, on_add, on_more), on_close, on_add, on_more


def test_panel_renders_every_field():
    panel, *_ = _panel()
    view = panel.render()
    assert view["title"] == "Newlands Stadium"
    assert view["description"] == NEWLANDS.description
    assert view["entranceFee"] == "R100"
    assert view["directions"] == "Cape Town, Western Cape"
    assert [img["src"] for img in view["images"]] == list(NEWLANDS.images)
    assert view["images"][1]["alt"] == "Newlands Stadium view 2"
    assert view["video"] == NEWLANDS.video


def test_panel_actions_invoke_callbacks():
    panel, on_close, on_add, on_more = _panel()
    panel.close()
    panel.add_to_trip()
    panel.view_more()
    on_close.assert_called_once_with()
    on_add.assert_called_once_with(NEWLANDS)
    on_more.assert_called_once_with(NEWLANDS)


def test_panel_render_is_pure():
    panel, *_ = _panel()
    assert panel.render() == panel.render()


# ── Slideshow ──────────────────────────────────────────────────────────────────

def test_slideshow_wraps_both_ways():
    show = Slideshow([NEWLANDS, ELLIS])
    assert show.current is NEWLANDS
    assert show.next() is ELLIS
    assert show.next() is NEWLANDS
    assert show.previous() is ELLIS
    assert show.index == 1


def test_empty_slideshow_is_inert():
    show = Slideshow()
    assert show.current is None
    assert show.next() is None
    assert show.previous() is None
    assert show.to_dict() == {"index": 0, "count": 0, "current": None}
