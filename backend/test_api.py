"""
test_api.py
──────────────────────────────────────────────────────────────────────────────
HTTP surface through FastAPI's TestClient:

  PART 1 — GET /attractions envelope (success / error, always HTTP 200)
  PART 2 — GET /attractions/{id}
  PART 3 — explorer session walk-through:
           open → search → marker click → add to trip → close → delete
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

import config
from api.routes import attractions as attractions_route
from api.server import app
from modules.catalog.errors import AttractionRetrievalError
from modules.catalog.sources import (
    AttractionSource,
    CachedAttractionSource,
    StaticAttractionSource,
)

_RECORDS = [
    {"id": 1, "name": "Newlands Stadium", "description": "Oldest rugby stadium in South Africa.",
     "entranceFee": "R100", "directions": "Cape Town, Western Cape",
     "images": ["https://img/n1.png", "https://img/n2.png"],
     "video": "https://www.youtube.com/embed/sample-video1",
     "coordinates": [-33.9706, 18.4687], "type": "historical"},
    {"id": 2, "name": "Ellis Park Stadium", "description": "Venue of the 1995 Rugby World Cup final.",
     "entranceFee": "R150", "directions": "Johannesburg, Gauteng", "images": [],
     "coordinates": [-26.1979, 28.0625], "type": "historical"},
]


class _BrokenSource(AttractionSource):
    name = "broken"

    def fetch_all(self):
        raise AttractionRetrievalError("DB down")


@pytest.fixture
def client():
    attractions_route.reset_store()
    with TestClient(app) as c:
        yield c
    attractions_route.reset_store()


def _static():
    return StaticAttractionSource(_RECORDS)


# ── PART 1: GET /attractions ───────────────────────────────────────────────────

def test_list_attractions_success(client):
    with patch("api.routes.attractions.build_source", return_value=_static()):
        resp = client.get("/attractions")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["data"] == _RECORDS


def test_list_attractions_error_envelope_is_http_200(client):
    with patch("api.routes.attractions.build_source", return_value=_BrokenSource()):
        resp = client.get("/attractions")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "error",
        "message": "Failed to retrieve attractions: DB down",
    }


def test_corrupt_cache_entry_still_serves_catalogue(client):
    cached = CachedAttractionSource(_static())
    with patch("api.routes.attractions.build_source", return_value=cached), \
         patch("db.redis_client.get_redis") as get_redis:
        get_redis.return_value.get.return_value = "{not json"
        resp = client.get("/attractions")
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "data": _RECORDS}


def test_failed_load_is_retried_on_next_request(client):
    with patch("api.routes.attractions.build_source", return_value=_BrokenSource()):
        assert client.get("/attractions").json()["status"] == "error"
    with patch("api.routes.attractions.build_source", return_value=_static()):
        assert client.get("/attractions").json()["status"] == "success"


def test_store_is_loaded_once(client):
    with patch("api.routes.attractions.build_source", return_value=_static()) as build:
        client.get("/attractions")
        client.get("/attractions")
    assert build.call_count == 1


def test_default_static_catalogue(client):
    with patch("config.ATTRACTION_SOURCE", "static"), \
         patch("config.ATTRACTIONS_CACHE_ENABLED", False):
        body = client.get("/attractions").json()
    assert body["status"] == "success"
    assert {"Newlands Stadium", "Ellis Park Stadium"} <= {a["name"] for a in body["data"]}


# ── PART 2: GET /attractions/{id} ──────────────────────────────────────────────

def test_get_single_attraction(client):
    with patch("api.routes.attractions.build_source", return_value=_static()):
        body = client.get("/attractions/2").json()
    assert body == {"status": "success", "data": _RECORDS[1]}


def test_get_unknown_attraction(client):
    with patch("api.routes.attractions.build_source", return_value=_static()):
        resp = client.get("/attractions/99")
    assert resp.status_code == 200
    assert resp.json() == {"status": "error", "message": "Attraction 99 not found"}


def test_health(client):
    body = client.get("/v1/health").json()
    assert body["status"] == "ok"
    assert body["service"] == config.SERVICE_NAME


# ── PART 3: explorer sessions ──────────────────────────────────────────────────

def _open_session(client, source=None) -> dict:
    with patch("api.routes.explorer.build_source", return_value=source or _static()):
        resp = client.post("/v1/explorer/sessions")
    assert resp.status_code == 200
    return resp.json()


def test_explorer_walkthrough(client):
    page = _open_session(client)
    sid = page["session_id"]
    assert page["state"] == "no-selection"
    assert page["error"] is None
    assert len(page["map"]["markers"]) == 2
    assert page["map"]["camera"]["center"] == list(config.MAP_DEFAULT_CENTER)
    assert page["detail_panel"] is None

    page = client.post(f"/v1/explorer/sessions/{sid}/search", json={"query": "ellis"}).json()
    assert [m["attractionId"] for m in page["map"]["markers"]] == [2]

    page = client.post(f"/v1/explorer/sessions/{sid}/markers/2/click").json()
    assert page["state"] == "selected"
    assert page["map"]["camera"] == {
        "center": [-26.1979, 28.0625],
        "zoom": config.MAP_HIGHLIGHT_ZOOM,
        "animate": True,
    }
    assert page["detail_panel"]["title"] == "Ellis Park Stadium"
    assert page["detail_panel"]["entranceFee"] == "R150"

    page = client.post(f"/v1/explorer/sessions/{sid}/add-to-trip").json()
    assert page["state"] == "selected"
    assert page["notifications"] == [{
        "kind": "add_to_trip",
        "attractionId": 2,
        "message": "Ellis Park Stadium has been added to your trip!",
    }]

    page = client.post(f"/v1/explorer/sessions/{sid}/view-more").json()
    assert page["notifications"][0]["kind"] == "view_more"

    page = client.post(f"/v1/explorer/sessions/{sid}/close").json()
    assert page["state"] == "no-selection"
    assert page["detail_panel"] is None
    assert page["notifications"] == []

    assert client.get(f"/v1/explorer/sessions/{sid}").json()["query"] == "ellis"

    assert client.delete(f"/v1/explorer/sessions/{sid}").json() == {"session_id": sid, "closed": True}
    assert client.get(f"/v1/explorer/sessions/{sid}").status_code == 404


def test_click_on_filtered_out_marker_is_404(client):
    sid = _open_session(client)["session_id"]
    client.post(f"/v1/explorer/sessions/{sid}/search", json={"query": "ellis"})
    resp = client.post(f"/v1/explorer/sessions/{sid}/markers/1/click")
    assert resp.status_code == 404


def test_add_to_trip_without_selection_is_409(client):
    sid = _open_session(client)["session_id"]
    assert client.post(f"/v1/explorer/sessions/{sid}/add-to-trip").status_code == 409
    assert client.post(f"/v1/explorer/sessions/{sid}/view-more").status_code == 409


def test_unknown_session_is_404(client):
    assert client.get("/v1/explorer/sessions/nope").status_code == 404
    assert client.post("/v1/explorer/sessions/nope/close").status_code == 404
    assert client.delete("/v1/explorer/sessions/nope").status_code == 404


def test_session_with_failed_load_shows_error_state(client):
    page = _open_session(client, source=_BrokenSource())
    assert page["attraction_count"] == 0
    assert page["map"]["markers"] == []
    assert page["error"] == "DB down"


def test_slideshow_navigation(client):
    page = _open_session(client)
    sid = page["session_id"]
    assert page["slideshow"]["current"]["id"] == 1
    assert page["slideshow"]["camera"]["center"] == [-33.9706, 18.4687]

    page = client.post(f"/v1/explorer/sessions/{sid}/slideshow/next").json()
    assert page["slideshow"]["current"]["id"] == 2
    assert [m["highlighted"] for m in page["slideshow"]["map"]["markers"]] == [False, True]
    assert page["slideshow"]["map"]["camera"]["center"] == [-26.1979, 28.0625]
    assert not any(m["highlighted"] for m in page["map"]["markers"])
    page = client.post(f"/v1/explorer/sessions/{sid}/slideshow/next").json()
    assert page["slideshow"]["index"] == 0
    page = client.post(f"/v1/explorer/sessions/{sid}/slideshow/previous").json()
    assert page["slideshow"]["current"]["id"] == 2
