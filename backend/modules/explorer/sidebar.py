"""
modules/explorer/sidebar.py
----------------------------
Detail panel for the selected attraction.

Holds no state of its own: render() is a projection of the attraction and
the three actions just call back into whoever owns the selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from schemas.attraction import Attraction


@dataclass(frozen=True)
class DetailPanel:
    attraction: Attraction
    on_close: Callable[[], None]
    on_add_to_trip: Callable[[Attraction], None]
    on_view_more: Callable[[Attraction], None]

    def render(self) -> dict:
        a = self.attraction
        return {
            "attractionId": a.id,
            "title":        a.name,
            "description":  a.description,
            "images": [
                {"src": src, "alt": f"{a.name} view {i}"}
                for i, src in enumerate(a.images, start=1)
            ],
            "entranceFee":  a.entrance_fee,
            "directions":   a.directions,
            "video":        a.video,
            "actions":      ["close", "add_to_trip", "view_more"],
        }

    def close(self) -> None:
        self.on_close()

    def add_to_trip(self) -> None:
        self.on_add_to_trip(self.attraction)

    def view_more(self) -> None:
        self.on_view_more(self.attraction)
