"""
modules/explorer/slideshow.py
------------------------------
Home-page carousel over the attraction sequence. The current slide is
what the map highlights.
"""

from __future__ import annotations

from typing import Optional, Sequence

from schemas.attraction import Attraction


class Slideshow:
    def __init__(self, attractions: Sequence[Attraction] = ()) -> None:
        self._slides = tuple(attractions)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Optional[Attraction]:
        return self._slides[self._index] if self._slides else None

    def next(self) -> Optional[Attraction]:
        if self._slides:
            self._index = (self._index + 1) % len(self._slides)
        return self.current

    def previous(self) -> Optional[Attraction]:
        if self._slides:
            self._index = (self._index - 1 + len(self._slides)) % len(self._slides)
        return self.current

    def __len__(self) -> int:
        return len(self._slides)

    def to_dict(self) -> dict:
        current = self.current
        return {
            "index": self._index,
            "count": len(self._slides),
            "current": current.to_dict() if current is not None else None,
        }
