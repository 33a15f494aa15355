"""
modules/catalog/attraction_store.py
------------------------------------
Read-only, ordered collection of attractions loaded once from a source.

Records that fail validation (empty name, coordinates outside the valid
lat/lon range, unknown type) or repeat an already-seen id are logged and
dropped, so every Attraction in a store can be rendered on the map.
"""

from __future__ import annotations

import logging
from typing import Iterator

from modules.catalog.errors import UnknownAttractionError
from modules.catalog.sources import AttractionSource
from modules.validation import filter_valid, unique_by_id, validate_attraction
from schemas.attraction import Attraction

logger = logging.getLogger(__name__)


class AttractionStore:
    """Immutable attraction sequence with id lookup."""

    def __init__(self, attractions: tuple[Attraction, ...] = ()) -> None:
        self._attractions = tuple(attractions)
        self._by_id = {a.id: a for a in self._attractions}

    @classmethod
    def from_attractions(cls, attractions: list[Attraction]) -> "AttractionStore":
        """Validate, de-duplicate by id and freeze."""
        valid = filter_valid(attractions, validate_attraction, to_dict=Attraction.to_dict)
        return cls(tuple(unique_by_id(valid)))

    @classmethod
    def load(cls, source: AttractionSource) -> "AttractionStore":
        """
        Fetch once from `source`.

        AttractionRetrievalError from the source propagates to the caller.
        """
        store = cls.from_attractions(source.fetch_all())
        logger.info("Loaded %d attractions from %s source", len(store), source.name)
        return store

    def all(self) -> tuple[Attraction, ...]:
        return self._attractions

    def get(self, attraction_id: int) -> Attraction:
        try:
            return self._by_id[attraction_id]
        except KeyError:
            raise UnknownAttractionError(attraction_id) from None

    def __len__(self) -> int:
        return len(self._attractions)

    def __iter__(self) -> Iterator[Attraction]:
        return iter(self._attractions)
