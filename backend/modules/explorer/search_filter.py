"""
modules/explorer/search_filter.py
----------------------------------
Free-text attraction search used by the explorer search bar.
"""

from __future__ import annotations

from typing import Optional, Sequence

from schemas.attraction import Attraction


def _contains(text: Optional[str], needle: str) -> bool:
    return isinstance(text, str) and needle in text.lower()


def filter_attractions(query: str, attractions: Sequence[Attraction]) -> list[Attraction]:
    """
    Return the attractions whose name or description contains `query`,
    case-insensitively, in their original order.

    An empty query returns the full sequence unchanged. Missing fields
    never match and never raise.
    """
    if not query:
        return list(attractions)
    needle = query.lower()
    return [
        a for a in attractions
        if _contains(a.name, needle) or _contains(a.description, needle)
    ]
