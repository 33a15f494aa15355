"""
modules/explorer/page_controller.py
------------------------------------
Owner of the explorer page state: the loaded attractions, the search query
and the current selection.

State machine
─────────────
    no-selection --marker_click(a)--> selected(a)
    selected(a)  --marker_click(b)--> selected(b)
    selected(a)  --close-->           no-selection

Initial state is no-selection; there is no terminal state.
add_to_trip / view_more only queue a notification, the state is unchanged.

Wiring
──────
    source ──load()──► attractions ──search()──► visible ──► MapView
                                                           │ marker click
                                                           ▼
                                  selected ◄── marker_click ── DetailPanel
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from modules.catalog.attraction_store import AttractionStore
from modules.catalog.errors import AttractionRetrievalError
from modules.catalog.sources import AttractionSource
from modules.explorer.map_view import MapState, MapView
from modules.explorer.search_filter import filter_attractions
from modules.explorer.sidebar import DetailPanel
from modules.explorer.slideshow import Slideshow
from modules.observability.journal import InteractionJournal
from schemas.attraction import Attraction

logger = logging.getLogger(__name__)


class PageState(str, Enum):
    no_selection = "no-selection"
    selected = "selected"


class NoSelectionError(RuntimeError):
    """A detail-panel action was requested while nothing is selected."""


@dataclass(frozen=True)
class Notification:
    kind: str            # "add_to_trip" | "view_more"
    attraction_id: int
    message: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "attractionId": self.attraction_id, "message": self.message}


class PageController:
    """
    Explorer page state owner.

    Args:
        source:     Where attractions come from (injected; no network needed in tests).
        journal:    Optional interaction journal; every transition is appended.
        session_id: Journal key; a uuid4 is generated when omitted.
    """

    def __init__(
        self,
        source: AttractionSource,
        journal: Optional[InteractionJournal] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self._source = source
        self._journal = journal
        self._store = AttractionStore()
        self._query = ""
        self._visible: list[Attraction] = []
        self._selected: Optional[Attraction] = None
        self._notifications: list[Notification] = []
        self._error: Optional[str] = None
        self._loaded = False
        self._disposed = False
        self.slideshow = Slideshow()
        self.map_view = MapView(on_marker_click=self.marker_click)
        self.slideshow_map = MapView()

    # ── read-only view ────────────────────────────────────────────────────

    @property
    def state(self) -> PageState:
        return PageState.selected if self._selected is not None else PageState.no_selection

    @property
    def selected(self) -> Optional[Attraction]:
        return self._selected

    @property
    def attractions(self) -> tuple[Attraction, ...]:
        return self._store.all()

    @property
    def visible(self) -> list[Attraction]:
        return list(self._visible)

    @property
    def query(self) -> str:
        return self._query

    @property
    def error(self) -> Optional[str]:
        """Message of the last load failure; None when the data loaded fine."""
        return self._error

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ── lifecycle ─────────────────────────────────────────────────────────

    def load(self) -> bool:
        """
        Populate the attraction list from the source, once.

        A retrieval failure leaves the list empty and sets `error` instead of
        raising. Returns False when the result was discarded because the
        controller was disposed while the fetch was in flight.
        """
        if self._loaded:
            return True
        try:
            store = AttractionStore.load(self._source)
            error = None
        except AttractionRetrievalError as exc:
            logger.warning("[%s] attraction load failed: %s", self.session_id, exc)
            store, error = AttractionStore(), str(exc)

        if self._disposed:
            logger.info("[%s] discarding load result for disposed page", self.session_id)
            return False

        self._store = store
        self._error = error
        self._loaded = True
        self._visible = filter_attractions(self._query, self._store.all())
        self.slideshow = Slideshow(self._store.all())
        self._record("load", {
            "count": len(self._store),
            "error": error,
        })
        return True

    def dispose(self) -> None:
        """Tear the page down; later load results are ignored."""
        self._disposed = True
        self._record("dispose", {})
        if self._journal is not None:
            self._journal.close(self.session_id)

    # ── transitions ───────────────────────────────────────────────────────

    def search(self, query: str) -> list[Attraction]:
        """Filter the visible attractions; the selection is kept."""
        self._query = query or ""
        self._visible = filter_attractions(self._query, self._store.all())
        self._record("search", {"query": self._query, "matches": len(self._visible)})
        return self.visible

    def marker_click(self, attraction: Attraction) -> None:
        """Any state → selected(attraction)."""
        previous = self._selected
        self._selected = attraction
        logger.debug("[%s] selected attraction %s", self.session_id, attraction.id)
        self._record("marker_click", {
            "attraction_id": attraction.id,
            "previous_id": previous.id if previous is not None else None,
        })

    def close(self) -> None:
        """Any state → no-selection."""
        self._selected = None
        self._record("close", {})

    def add_to_trip(self, attraction: Optional[Attraction] = None) -> Notification:
        target = self._action_target(attraction)
        return self._notify(
            "add_to_trip", target, f"{target.name} has been added to your trip!"
        )

    def view_more(self, attraction: Optional[Attraction] = None) -> Notification:
        target = self._action_target(attraction)
        return self._notify(
            "view_more", target, f"More details about {target.name} are coming soon."
        )

    # ── projections ───────────────────────────────────────────────────────

    def map_state(self) -> MapState:
        """Visible attractions, camera on the selection (if any)."""
        return self.map_view.render(self._visible, highlighted=self._selected)

    def slideshow_map_state(self) -> MapState:
        """Every loaded attraction, camera on the current slide."""
        return self.slideshow_map.render(self._store.all(), highlighted=self.slideshow.current)

    def detail_panel(self) -> Optional[DetailPanel]:
        if self._selected is None:
            return None
        return DetailPanel(
            attraction=self._selected,
            on_close=self.close,
            on_add_to_trip=self.add_to_trip,
            on_view_more=self.view_more,
        )

    def pop_notifications(self) -> list[Notification]:
        """Return and clear pending notifications."""
        pending, self._notifications = self._notifications, []
        return pending

    # ── internals ─────────────────────────────────────────────────────────

    def _action_target(self, attraction: Optional[Attraction]) -> Attraction:
        target = attraction if attraction is not None else self._selected
        if target is None:
            raise NoSelectionError("No attraction is selected")
        return target

    def _notify(self, kind: str, attraction: Attraction, message: str) -> Notification:
        note = Notification(kind=kind, attraction_id=attraction.id, message=message)
        self._notifications.append(note)
        self._record(kind, {"attraction_id": attraction.id})
        return note

    def _record(self, event_type: str, payload: dict) -> None:
        if self._journal is not None:
            self._journal.append(self.session_id, event_type, {"state": self.state.value, **payload})
