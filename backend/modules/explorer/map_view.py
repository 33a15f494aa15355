"""
modules/explorer/map_view.py
-----------------------------
Leaflet-shaped view-model for the attraction map.

MapView.render() turns an attraction sequence (plus an optional highlighted
attraction) into a MapState: one Marker per attraction, the camera target
and the tile layer. The MapState serialises straight into the props a
Leaflet MapContainer / Marker / Popup tree needs.

Camera rules
────────────
  highlighted attraction  → fly to its coordinates at MAP_HIGHLIGHT_ZOOM
  no highlight            → default wide view (MAP_DEFAULT_CENTER, MAP_DEFAULT_ZOOM)

MapView never owns selection state: click() only forwards the clicked
attraction to the on_marker_click callback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import config
from modules.catalog.errors import UnknownAttractionError
from schemas.attraction import Attraction, AttractionType


# ── Icons ──────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MarkerIcon:
    icon_url: str
    icon_size: tuple[int, int] = (30, 40)
    icon_anchor: tuple[int, int] = (15, 40)
    popup_anchor: tuple[int, int] = (0, -40)

    def to_dict(self) -> dict:
        return {
            "iconUrl":     self.icon_url,
            "iconSize":    list(self.icon_size),
            "iconAnchor":  list(self.icon_anchor),
            "popupAnchor": list(self.popup_anchor),
        }


# type → icon file (trophy for historic venues, player for legends)
_ICON_FILES: dict[AttractionType, str] = {
    AttractionType.historical: "trophy.png",
    AttractionType.legend:     "rugby.png",
    AttractionType.grassroots: "grassroots.png",
}

MARKER_ICONS: dict[AttractionType, MarkerIcon] = {
    kind: MarkerIcon(icon_url=f"{config.MAP_ICON_BASE_URL}/{filename}")
    for kind, filename in _ICON_FILES.items()
}


def icon_for(kind: AttractionType) -> MarkerIcon:
    return MARKER_ICONS[kind]


# ── Render output ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Marker:
    attraction_id: int
    position: tuple[float, float]    # (lat, lon)
    icon: MarkerIcon
    popup_title: str
    popup_body: str
    highlighted: bool = False

    def to_dict(self) -> dict:
        return {
            "attractionId": self.attraction_id,
            "position":     list(self.position),
            "icon":         self.icon.to_dict(),
            "popup":        {"title": self.popup_title, "body": self.popup_body},
            "highlighted":  self.highlighted,
        }


@dataclass(frozen=True)
class Camera:
    center: tuple[float, float]
    zoom: int
    animate: bool = False            # True → flyTo, False → setView

    def to_dict(self) -> dict:
        return {"center": list(self.center), "zoom": self.zoom, "animate": self.animate}


@dataclass(frozen=True)
class MapState:
    markers: tuple[Marker, ...]
    camera: Camera
    tile_url: str = field(default_factory=lambda: config.MAP_TILE_URL)
    tile_attribution: str = field(default_factory=lambda: config.MAP_TILE_ATTRIBUTION)

    def to_dict(self) -> dict:
        return {
            "markers": [m.to_dict() for m in self.markers],
            "camera":  self.camera.to_dict(),
            "tiles":   {"url": self.tile_url, "attribution": self.tile_attribution},
        }


def default_camera() -> Camera:
    return Camera(center=config.MAP_DEFAULT_CENTER, zoom=config.MAP_DEFAULT_ZOOM)


def camera_for(highlighted: Optional[Attraction]) -> Camera:
    if highlighted is None:
        return default_camera()
    return Camera(
        center=highlighted.coordinates,
        zoom=config.MAP_HIGHLIGHT_ZOOM,
        animate=True,
    )


# ── MapView ────────────────────────────────────────────────────────────────────

class MapView:
    """Renders markers for attractions and forwards marker clicks."""

    def __init__(self, on_marker_click: Optional[Callable[[Attraction], None]] = None) -> None:
        self._on_marker_click = on_marker_click
        self._rendered: dict[int, Attraction] = {}

    def render(
        self,
        attractions: Sequence[Attraction],
        highlighted: Optional[Attraction] = None,
    ) -> MapState:
        highlighted_id = highlighted.id if highlighted is not None else None
        markers = tuple(
            Marker(
                attraction_id=a.id,
                position=a.coordinates,
                icon=icon_for(a.type),
                popup_title=a.name,
                popup_body=a.description,
                highlighted=a.id == highlighted_id,
            )
            for a in attractions
        )
        self._rendered = {a.id: a for a in attractions}
        return MapState(markers=markers, camera=camera_for(highlighted))

    def click(self, attraction_id: int) -> Attraction:
        """
        Simulate a click on the marker for `attraction_id` in the last render.

        Raises UnknownAttractionError when no such marker is on the map.
        """
        try:
            attraction = self._rendered[attraction_id]
        except KeyError:
            raise UnknownAttractionError(attraction_id) from None
        if self._on_marker_click is not None:
            self._on_marker_click(attraction)
        return attraction
