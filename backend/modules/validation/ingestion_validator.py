"""
modules/validation/ingestion_validator.py
------------------------------------------
Data-quality guards applied to attraction records before they enter an
AttractionStore or are written to Postgres.

  Attraction:
    ✓ Integer id
    ✓ Non-empty name
    ✓ Non-null coordinates
    ✓ Latitude in [-90, 90]
    ✓ Longitude in [-180, 180]
    ✓ Coordinates are not both exactly 0.0 (likely missing)
    ✓ type in {historical, legend, grassroots}

  Catalogue:
    ✓ id unique (first occurrence kept)

Usage:
    from modules.validation import validate_attraction, filter_valid

    result = validate_attraction(attraction.to_dict())
    if not result.valid:
        print(result.errors)

    clean = unique_by_id(filter_valid(records, validate_attraction, to_dict=...))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from schemas.attraction import AttractionType

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VALID_TYPES = {t.value for t in AttractionType}


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of failure reasons.
        record: The input record dict (for logging purposes).
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    record: dict = field(default_factory=dict, repr=False)

    def __bool__(self) -> bool:
        return self.valid


# ── Attraction validation ──────────────────────────────────────────────────────

def validate_attraction(record: dict[str, Any]) -> ValidationResult:
    """
    Validate one attraction record in wire form
    (``{id, name, coordinates: [lat, lon], type, ...}``).
    """
    errors: list[str] = []

    # ── Id ─────────────────────────────────────────────────────────────────
    att_id = record.get("id")
    if isinstance(att_id, bool) or not isinstance(att_id, int):
        errors.append(f"id must be an integer (got {att_id!r})")

    # ── Name ───────────────────────────────────────────────────────────────
    name = record.get("name", "")
    if not name or not str(name).strip():
        errors.append("name must not be empty or NULL")

    # ── Coordinates ────────────────────────────────────────────────────────
    coords = record.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) != 2:
        errors.append(f"coordinates must be a [lat, lon] pair (got {coords!r})")
    else:
        lat, lon = coords
        try:
            lat = float(lat)
            lon = float(lon)
        except (TypeError, ValueError):
            errors.append(
                f"coordinates must be numeric (got lat={lat!r}, lon={lon!r})"
            )
            return ValidationResult(valid=False, errors=errors, record=record)

        if not (-90.0 <= lat <= 90.0):
            errors.append(f"lat={lat} is outside valid range [-90, 90]")

        if not (-180.0 <= lon <= 180.0):
            errors.append(f"lon={lon} is outside valid range [-180, 180]")

        if lat == 0.0 and lon == 0.0:
            errors.append(
                "lat=0.0 and lon=0.0: likely a missing/default value, "
                "(0°N, 0°E) is not a valid attraction"
            )

    # ── Type ───────────────────────────────────────────────────────────────
    kind = record.get("type")
    kind = kind.value if isinstance(kind, AttractionType) else kind
    if not isinstance(kind, str) or kind not in _VALID_TYPES:
        errors.append(
            f"type={kind!r} must be one of {sorted(_VALID_TYPES)}"
        )

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)


# ── Batch helpers ──────────────────────────────────────────────────────────────

def filter_valid(
    items: Iterable[T],
    validator: Callable[[dict], ValidationResult],
    to_dict: Callable[[T], dict] | None = None,
) -> list[T]:
    """
    Apply a validator to every item, return only the valid ones.

    Args:
        items:     Items (dataclass instances or dicts).
        validator: e.g. validate_attraction.
        to_dict:   Optional callable to convert each item to a dict.
                   If None, items are assumed to already be dicts.

    Every rejected record is logged at WARNING level.
    """
    valid_items: list[T] = []
    rejected = 0
    total = 0

    for item in items:
        total += 1
        record_dict = to_dict(item) if to_dict is not None else item
        result = validator(record_dict)
        if result.valid:
            valid_items.append(item)
        else:
            rejected += 1
            logger.warning(
                "Rejected attraction %r: %s",
                record_dict.get("name", record_dict.get("id", "?")),
                "; ".join(result.errors),
            )

    if rejected:
        logger.warning(
            "%d/%d attraction records rejected; %d passed.",
            rejected, total, len(valid_items),
        )

    return valid_items


def unique_by_id(items: Iterable[T], key: Callable[[T], Any] = lambda a: a.id) -> list[T]:
    """Drop items whose id was already seen; the first occurrence is kept."""
    seen: set = set()
    out: list[T] = []
    for item in items:
        item_id = key(item)
        if item_id in seen:
            logger.warning("Rejected duplicate attraction id %r", item_id)
            continue
        seen.add(item_id)
        out.append(item)
    return out
