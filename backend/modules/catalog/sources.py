"""
modules/catalog/sources.py
---------------------------
Data-access boundary for attraction records.

Every source implements ``fetch_all() -> list[Attraction]`` and raises
AttractionRetrievalError on failure, so the AttractionStore and the
explorer PageController can be exercised without a network or database.

    StaticAttractionSource    built-in catalogue (default)
    PostgresAttractionSource  `attractions` table via psycopg2
    CachedAttractionSource    Redis JSON cache in front of another source
    RemoteAttractionSource    GET {API_BASE_URL}/attractions (attraction_client.py)

build_source() picks one from config.ATTRACTION_SOURCE.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

import psycopg2
import redis

import config
from db import redis_client
from db.connection import get_conn
from db.repositories import attraction_repo
from modules.catalog.errors import AttractionRetrievalError
from modules.catalog.static_catalog import STATIC_ATTRACTIONS
from schemas.attraction import Attraction

logger = logging.getLogger(__name__)


def parse_records(records: Iterable[dict]) -> list[Attraction]:
    """Wire-form dicts → Attraction list; a malformed record fails the batch."""
    try:
        return [Attraction.from_dict(r) for r in records]
    except (TypeError, ValueError) as exc:
        raise AttractionRetrievalError(f"malformed attraction data: {exc}") from exc


class AttractionSource(ABC):
    """Abstract provider of the attraction sequence."""

    name: str = "abstract"

    @abstractmethod
    def fetch_all(self) -> list[Attraction]:
        """Return every attraction, in display order."""


class StaticAttractionSource(AttractionSource):
    """Serves an in-memory list of wire-form records (the built-in catalogue by default)."""

    name = "static"

    def __init__(self, records: Iterable[dict] | None = None) -> None:
        self._records = list(records) if records is not None else STATIC_ATTRACTIONS

    def fetch_all(self) -> list[Attraction]:
        return parse_records(self._records)


class PostgresAttractionSource(AttractionSource):
    """Reads the `attractions` table."""

    name = "postgres"

    def fetch_all(self) -> list[Attraction]:
        try:
            with get_conn() as conn:
                records = attraction_repo.get_all_attractions(conn)
        except psycopg2.Error as exc:
            logger.error("Postgres attraction query failed: %s", exc)
            raise AttractionRetrievalError(str(exc).strip()) from exc
        return parse_records(records)


class CachedAttractionSource(AttractionSource):
    """
    Redis read-through cache in front of another source.

    Redis being unavailable is not a retrieval failure: the wrapped source
    is queried directly and the error logged. A corrupt cache entry (not
    JSON, not a list, or holding malformed records) is dropped and refilled
    from the wrapped source.
    """

    name = "cached"

    def __init__(self, inner: AttractionSource) -> None:
        self._inner = inner

    def fetch_all(self) -> list[Attraction]:
        try:
            cached = redis_client.get_cached_attractions()
        except redis.RedisError as exc:
            logger.warning("Redis read failed, bypassing cache: %s", exc)
            return self._inner.fetch_all()
        except ValueError as exc:
            logger.warning("Bad attraction cache entry, refilling: %s", exc)
            self._drop_cache()
            cached = None

        if cached is not None:
            try:
                if not isinstance(cached, list):
                    raise AttractionRetrievalError("cached catalogue is not a list")
                attractions = parse_records(cached)
            except AttractionRetrievalError as exc:
                logger.warning("Bad attraction cache entry, refilling: %s", exc)
                self._drop_cache()
            else:
                logger.debug("Attraction cache hit (%d records)", len(attractions))
                return attractions

        attractions = self._inner.fetch_all()
        try:
            redis_client.set_cached_attractions([a.to_dict() for a in attractions])
        except redis.RedisError as exc:
            logger.warning("Redis write failed, catalogue not cached: %s", exc)
        return attractions

    @staticmethod
    def _drop_cache() -> None:
        try:
            redis_client.invalidate_attractions()
        except redis.RedisError as exc:
            logger.warning("Could not drop bad attraction cache entry: %s", exc)


def build_source(kind: str | None = None) -> AttractionSource:
    """
    Construct the configured source.

    Args:
        kind: "static" | "postgres" | "remote"; defaults to config.ATTRACTION_SOURCE.

    Raises:
        ValueError for an unknown kind.
    """
    kind = (kind or config.ATTRACTION_SOURCE).lower()
    source: AttractionSource
    if kind == "static":
        source = StaticAttractionSource()
    elif kind == "postgres":
        source = PostgresAttractionSource()
    elif kind == "remote":
        # Imported here: attraction_client imports this module for the base class
        from modules.catalog.attraction_client import RemoteAttractionSource
        source = RemoteAttractionSource()
    else:
        raise ValueError(
            f"Unknown ATTRACTION_SOURCE {kind!r}; expected static | postgres | remote"
        )

    if config.ATTRACTIONS_CACHE_ENABLED:
        source = CachedAttractionSource(source)
    logger.info(
        "Attraction source: %s (redis cache %s)",
        kind, "on" if config.ATTRACTIONS_CACHE_ENABLED else "off",
    )
    return source
