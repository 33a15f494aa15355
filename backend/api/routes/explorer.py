"""
api/routes/explorer.py
-----------------------
Explorer page sessions: the attraction map, search bar, sidebar and
slideshow driven over HTTP.

Flow:
  1. POST   /v1/explorer/sessions                          → session_id + page state
  2. POST   /v1/explorer/sessions/{id}/search              → filter markers
  3. POST   /v1/explorer/sessions/{id}/markers/{aid}/click → select, fly camera, open sidebar
  4. POST   /v1/explorer/sessions/{id}/add-to-trip         → notification
     POST   /v1/explorer/sessions/{id}/view-more           → notification
  5. POST   /v1/explorer/sessions/{id}/close               → clear selection
  6. POST   /v1/explorer/sessions/{id}/slideshow/next|previous
  7. GET    /v1/explorer/sessions/{id}                     → page state
  8. DELETE /v1/explorer/sessions/{id}

Page state JSON:
    {
      "session_id", "state": "no-selection" | "selected", "query",
      "error": null | str,          # load failure indicator
      "attraction_count", "map": MapState, "detail_panel": null | {...},
      "slideshow": {index, count, current, map: MapState, camera},
      "notifications": [...]
    }
"""

from __future__ import annotations

import logging
import threading

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

import config
from modules.catalog.errors import UnknownAttractionError
from modules.catalog.sources import build_source
from modules.explorer.page_controller import NoSelectionError, PageController
from modules.observability.journal import InteractionJournal

logger = logging.getLogger(__name__)

router = APIRouter()

# ── In-memory session store ────────────────────────────────────────────────────
# key: session_id (str uuid4) → PageController
_sessions: dict[str, PageController] = {}
_sessions_lock = threading.Lock()
_journal: InteractionJournal | None = None


def _get_journal() -> InteractionJournal | None:
    global _journal
    if not config.INTERACTION_LOG_ENABLED:
        return None
    if _journal is None:
        _journal = InteractionJournal()
    return _journal


# ── Request schemas ────────────────────────────────────────────────────────────

class SearchRequest(BaseModel):
    query: str = Field("", description="Free text matched against name and description")


# ── Serialiser ─────────────────────────────────────────────────────────────────

def _ser_page(page: PageController) -> dict:
    panel = page.detail_panel()
    slideshow_map = page.slideshow_map_state()
    return {
        "session_id":       page.session_id,
        "state":            page.state.value,
        "query":            page.query,
        "error":            page.error,
        "attraction_count": len(page.attractions),
        "map":              page.map_state().to_dict(),
        "detail_panel":     panel.render() if panel is not None else None,
        "slideshow": {
            **page.slideshow.to_dict(),
            "map":    slideshow_map.to_dict(),
            "camera": slideshow_map.camera.to_dict(),
        },
        "notifications":    [n.to_dict() for n in page.pop_notifications()],
    }


def get_page(session_id: str) -> PageController:
    """Retrieve a live page or raise 404."""
    page = _sessions.get(session_id)
    if page is None:
        raise HTTPException(
            status_code=404,
            detail=f"Session '{session_id}' not found. Call POST /v1/explorer/sessions first.",
        )
    return page


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post("/sessions", summary="Open an explorer page")
def create_session() -> dict:
    """Loads the attractions once; a load failure is reported in `error`, not as an HTTP error."""
    try:
        source = build_source()
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    page = PageController(source=source, journal=_get_journal())
    page.load()
    with _sessions_lock:
        _sessions[page.session_id] = page
    logger.info("Explorer session %s opened (%d attractions)", page.session_id, len(page.attractions))
    return _ser_page(page)


@router.get("/sessions/{session_id}", summary="Current page state")
def read_session(session_id: str) -> dict:
    return _ser_page(get_page(session_id))


@router.post("/sessions/{session_id}/search", summary="Filter attractions by text")
def search(session_id: str, req: SearchRequest) -> dict:
    page = get_page(session_id)
    page.search(req.query)
    return _ser_page(page)


@router.post("/sessions/{session_id}/markers/{attraction_id}/click", summary="Click a map marker")
def click_marker(session_id: str, attraction_id: int) -> dict:
    page = get_page(session_id)
    # Markers are whatever the page currently shows
    page.map_state()
    try:
        page.map_view.click(attraction_id)
    except UnknownAttractionError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _ser_page(page)


@router.post("/sessions/{session_id}/close", summary="Close the detail panel")
def close_panel(session_id: str) -> dict:
    page = get_page(session_id)
    page.close()
    return _ser_page(page)


@router.post("/sessions/{session_id}/add-to-trip", summary="Add the selected attraction to the trip")
def add_to_trip(session_id: str) -> dict:
    page = get_page(session_id)
    try:
        page.add_to_trip()
    except NoSelectionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _ser_page(page)


@router.post("/sessions/{session_id}/view-more", summary="View more about the selected attraction")
def view_more(session_id: str) -> dict:
    page = get_page(session_id)
    try:
        page.view_more()
    except NoSelectionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _ser_page(page)


@router.post("/sessions/{session_id}/slideshow/next", summary="Next slide")
def next_slide(session_id: str) -> dict:
    page = get_page(session_id)
    page.slideshow.next()
    return _ser_page(page)


@router.post("/sessions/{session_id}/slideshow/previous", summary="Previous slide")
def previous_slide(session_id: str) -> dict:
    page = get_page(session_id)
    page.slideshow.previous()
    return _ser_page(page)


@router.delete("/sessions/{session_id}", summary="Close the explorer page")
def delete_session(session_id: str) -> dict:
    with _sessions_lock:
        page = _sessions.pop(session_id, None)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found.")
    page.dispose()
    return {"session_id": session_id, "closed": True}
