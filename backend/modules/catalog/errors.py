"""
modules/catalog/errors.py
--------------------------
Exceptions raised by the attraction catalogue and the explorer view-models.
"""

from __future__ import annotations


class AttractionRetrievalError(RuntimeError):
    """
    The only data-access failure kind: attractions could not be retrieved.

    Covers network failures, malformed payloads, database errors and
    error envelopes alike; callers surface ``str(exc)`` as the message.
    """


class UnknownAttractionError(KeyError):
    """An attraction id that is not present in the store / rendered map."""

    def __init__(self, attraction_id: int) -> None:
        super().__init__(attraction_id)
        self.attraction_id = attraction_id

    def __str__(self) -> str:
        return f"Attraction {self.attraction_id} not found"
