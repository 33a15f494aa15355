"""
schemas/attraction.py
---------------------
Dataclass definition for an Attraction record and its JSON wire form.

Wire format (GET /attractions → data[]):
    {
        "id":          1,
        "name":        "Newlands Stadium",
        "description": "...",
        "entranceFee": "R100",
        "directions":  "Cape Town, Western Cape",
        "images":      ["https://...", ...],
        "video":       "https://www.youtube.com/embed/...",   # optional
        "coordinates": [-33.9706, 18.4687],                    # [lat, lon]
        "type":        "historical"                            # historical | legend | grassroots
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class AttractionType(str, Enum):
    """Closed set of attraction kinds; only used to pick a marker icon."""
    historical = "historical"
    legend = "legend"
    grassroots = "grassroots"


@dataclass(frozen=True)
class Attraction:
    """
    A rugby-heritage point of interest.

    Immutable once loaded. `entrance_fee` and `directions` are free-form
    display strings, not structured currency / address values.
    """
    id: int
    name: str
    description: str
    coordinates: tuple[float, float]                  # (lat, lon)
    type: AttractionType = AttractionType.historical
    entrance_fee: str = ""
    directions: str = ""
    images: tuple[str, ...] = field(default_factory=tuple)
    video: Optional[str] = None

    @property
    def lat(self) -> float:
        return self.coordinates[0]

    @property
    def lon(self) -> float:
        return self.coordinates[1]

    # ── wire form ─────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Attraction":
        """
        Parse the camelCase wire form.

        Raises ValueError when a required field is missing or has the wrong
        shape (non-integer id, coordinates that are not a numeric pair,
        images that are not a list, unknown type).
        """
        try:
            raw_id = data["id"]
            name = data["name"]
            raw_coords = data["coordinates"]
        except KeyError as exc:
            raise ValueError(f"attraction record is missing field {exc.args[0]!r}") from exc

        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            try:
                raw_id = int(raw_id)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"attraction id must be an integer (got {raw_id!r})") from exc

        try:
            lat, lon = (float(c) for c in raw_coords)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"coordinates must be a [lat, lon] pair (got {raw_coords!r})"
            ) from exc

        raw_images = data.get("images") or ()
        if not isinstance(raw_images, (list, tuple)):
            raise ValueError(f"images must be a list of URLs (got {raw_images!r})")

        try:
            kind = AttractionType(data.get("type", AttractionType.historical.value))
        except ValueError as exc:
            raise ValueError(f"unknown attraction type {data.get('type')!r}") from exc

        return cls(
            id=raw_id,
            name=name,
            description=data.get("description", ""),
            coordinates=(lat, lon),
            type=kind,
            entrance_fee=data.get("entranceFee", ""),
            directions=data.get("directions", ""),
            images=tuple(raw_images),
            video=data.get("video") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase wire form (``video`` omitted when absent)."""
        out: dict[str, Any] = {
            "id":          self.id,
            "name":        self.name,
            "description": self.description,
            "entranceFee": self.entrance_fee,
            "directions":  self.directions,
            "images":      list(self.images),
            "coordinates": [self.lat, self.lon],
            "type":        self.type.value,
        }
        if self.video:
            out["video"] = self.video
        return out
