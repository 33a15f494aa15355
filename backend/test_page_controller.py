"""
test_page_controller.py
──────────────────────────────────────────────────────────────────────────────
PageController state machine and its wiring:

  · marker click from any state → selected(a)
  · close from any state        → no-selection
  · add-to-trip / view-more     → notification, state unchanged
  · search keeps the selection and filters the map
  · load failure                → empty list + error, no exception
  · load finishing after dispose is discarded
  · interaction journal
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

import config
from modules.catalog.attraction_client import RemoteAttractionSource
from modules.catalog.errors import AttractionRetrievalError
from modules.catalog.sources import AttractionSource, StaticAttractionSource
from modules.explorer.page_controller import NoSelectionError, PageController, PageState
from modules.observability.journal import InteractionJournal

_RECORDS = [
    {"id": 1, "name": "Newlands Stadium", "description": "Oldest rugby stadium.",
     "entranceFee": "R100", "directions": "Cape Town", "images": [],
     "coordinates": [-33.9706, 18.4687], "type": "historical"},
    {"id": 2, "name": "Ellis Park Stadium", "description": "1995 Rugby World Cup final.",
     "entranceFee": "R150", "directions": "Johannesburg", "images": [],
     "coordinates": [-26.1979, 28.0625], "type": "historical"},
]


class _BrokenSource(AttractionSource):
    name = "broken"

    def fetch_all(self):
        raise AttractionRetrievalError("DB down")


def _page(**kwargs) -> PageController:
    page = PageController(StaticAttractionSource(_RECORDS), **kwargs)
    assert page.load() is True
    return page


# ── State machine ──────────────────────────────────────────────────────────────

def test_initial_state_is_no_selection():
    page = _page()
    assert page.state is PageState.no_selection
    assert page.selected is None
    assert page.detail_panel() is None
    assert page.map_state().camera.center == config.MAP_DEFAULT_CENTER


def test_marker_click_selects_and_flies_camera():
    page = _page()
    page.map_state()
    page.map_view.click(2)
    assert page.state is PageState.selected
    assert page.selected.id == 2
    assert page.map_state().camera.center == (-26.1979, 28.0625)
    assert page.detail_panel().render()["title"] == "Ellis Park Stadium"


def test_marker_click_while_selected_switches_selection():
    page = _page()
    a, b = page.attractions
    page.marker_click(a)
    page.marker_click(b)
    assert page.selected is b


def test_close_from_any_state():
    page = _page()
    page.close()
    assert page.state is PageState.no_selection
    page.marker_click(page.attractions[0])
    page.detail_panel().close()
    assert page.state is PageState.no_selection
    assert page.map_state().camera.center == config.MAP_DEFAULT_CENTER


def test_add_to_trip_and_view_more_notify_without_changing_state():
    page = _page()
    first = page.attractions[0]
    page.marker_click(first)
    panel = page.detail_panel()
    panel.add_to_trip()
    panel.view_more()
    assert page.selected is first
    notes = page.pop_notifications()
    assert [n.kind for n in notes] == ["add_to_trip", "view_more"]
    assert notes[0].message == "Newlands Stadium has been added to your trip!"
    assert page.pop_notifications() == []


def test_actions_without_selection_raise():
    page = _page()
    with pytest.raises(NoSelectionError):
        page.add_to_trip()
    with pytest.raises(NoSelectionError):
        page.view_more()


# ── Search wiring ──────────────────────────────────────────────────────────────

def test_search_filters_markers_and_keeps_selection():
    page = _page()
    page.marker_click(page.attractions[0])
    visible = page.search("ellis")
    assert [a.id for a in visible] == [2]
    assert [m.attraction_id for m in page.map_state().markers] == [2]
    assert page.selected.id == 1
    page.search("")
    assert len(page.map_state().markers) == 2


def test_search_before_load_applies_once_loaded():
    page = PageController(StaticAttractionSource(_RECORDS))
    page.search("newlands")
    page.load()
    assert [a.id for a in page.visible] == [1]


# ── Loading ────────────────────────────────────────────────────────────────────

def test_load_failure_sets_error_and_empty_list():
    page = PageController(_BrokenSource())
    assert page.load() is True
    assert page.attractions == ()
    assert page.error == "DB down"
    assert page.map_state().markers == ()


def test_backend_error_envelope_becomes_empty_list_with_error():
    resp = MagicMock()
    resp.json.return_value = {"status": "error", "message": "DB down"}
    session = MagicMock()
    session.get.return_value = resp

    page = PageController(RemoteAttractionSource(base_url="http://api", session=session))
    page.load()
    assert page.attractions == ()
    assert page.error == "DB down"
    session.get.assert_called_once_with("http://api/attractions", timeout=config.API_REQUEST_TIMEOUT)


def test_load_runs_once():
    source = MagicMock(wraps=StaticAttractionSource(_RECORDS))
    source.name = "static"
    page = PageController(source)
    page.load()
    page.load()
    assert source.fetch_all.call_count == 1


def test_result_discarded_when_disposed_mid_fetch():
    holder: dict = {}

    class _UnmountingSource(StaticAttractionSource):
        def fetch_all(self):
            holder["page"].dispose()
            return super().fetch_all()

    page = PageController(_UnmountingSource(_RECORDS))
    holder["page"] = page
    assert page.load() is False
    assert page.attractions == ()
    assert page.loaded is False
    assert page.disposed is True


def test_slideshow_follows_loaded_attractions():
    page = _page()
    assert page.slideshow.current.id == 1
    assert page.slideshow.next().id == 2


def test_slideshow_map_highlights_current_slide():
    page = _page()
    page.search("ellis")
    page.slideshow.next()
    state = page.slideshow_map_state()
    assert [(m.attraction_id, m.highlighted) for m in state.markers] == [(1, False), (2, True)]
    assert state.camera.center == (-26.1979, 28.0625)
    # the page map is unaffected by the slideshow
    assert [m.attraction_id for m in page.map_state().markers] == [2]
    assert not any(m.highlighted for m in page.map_state().markers)


# ── Journal ────────────────────────────────────────────────────────────────────

def test_transitions_are_journaled(tmp_path):
    journal = InteractionJournal(tmp_path)
    page = _page(journal=journal, session_id="sess_test")
    page.marker_click(page.attractions[1])
    page.add_to_trip()
    page.close()
    journal.close()

    events = journal.entries("sess_test")
    assert [e["event"] for e in events] == ["load", "marker_click", "add_to_trip", "close"]
    assert {k: events[1][k] for k in ("state", "attraction_id", "previous_id")} == {
        "state": "selected", "attraction_id": 2, "previous_id": None,
    }
    assert events[-1]["state"] == "no-selection"
    assert journal.path_for("sess_test") == tmp_path / "sess_test.jsonl"
