"""
api/routes/attractions.py
--------------------------
GET /attractions
GET /attractions/{attraction_id}

Read-only catalogue endpoints. Both always answer HTTP 200 with an
envelope, the contract the explorer frontend was built against:

    {"status": "success", "data": ...}
    {"status": "error",   "message": "..."}

The store is loaded once per process; a failed load is not cached, so the
next request tries the source again.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from fastapi import APIRouter

from modules.catalog.attraction_store import AttractionStore
from modules.catalog.errors import AttractionRetrievalError, UnknownAttractionError
from modules.catalog.sources import build_source

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Process-wide store ─────────────────────────────────────────────────────────
_store: Optional[AttractionStore] = None
_store_lock = threading.Lock()


def get_store() -> AttractionStore:
    """Return the loaded store, loading it on first call (may raise AttractionRetrievalError)."""
    global _store
    with _store_lock:
        if _store is None:
            _store = AttractionStore.load(build_source())
        return _store


def reset_store() -> None:
    """Forget the loaded store (next request reloads from the source)."""
    global _store
    with _store_lock:
        _store = None


def _error(message: str) -> dict:
    return {"status": "error", "message": message}


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.get("", summary="List all attractions")
def list_attractions() -> dict:
    """Every attraction in catalogue order."""
    try:
        store = get_store()
    except AttractionRetrievalError as exc:
        logger.error("Failed to retrieve attractions: %s", exc)
        return _error(f"Failed to retrieve attractions: {exc}")

    return {"status": "success", "data": [a.to_dict() for a in store]}


@router.get("/{attraction_id}", summary="Get one attraction")
def get_attraction(attraction_id: int) -> dict:
    try:
        attraction = get_store().get(attraction_id)
    except AttractionRetrievalError as exc:
        logger.error("Failed to retrieve attraction %s: %s", attraction_id, exc)
        return _error(f"Failed to retrieve attractions: {exc}")
    except UnknownAttractionError as exc:
        return _error(str(exc))

    return {"status": "success", "data": attraction.to_dict()}
