"""
db/redis_client.py
-------------------
redis-py client — singleton plus helpers for the catalogue cache.

Key schema:

  attractions:all
      Type : String (JSON array of wire-form attraction dicts)
      TTL  : ATTRACTIONS_CACHE_TTL (default 3600 s)

Environment variables (set in config.py):
    REDIS_HOST               default: localhost
    REDIS_PORT               default: 6379
    REDIS_DB                 default: 0
    REDIS_PASSWORD           default: ""  (empty = no auth)
    ATTRACTIONS_CACHE_TTL    default: 3600
"""

from __future__ import annotations

import json
from typing import Any

import redis

import config

ATTRACTIONS_KEY = "attractions:all"

# Initialised lazily on first call to get_redis()
_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """Return the singleton Redis client, creating it on first call."""
    global _client
    if _client is None:
        kwargs: dict[str, Any] = {
            "host":             config.REDIS_HOST,
            "port":             config.REDIS_PORT,
            "db":               config.REDIS_DB,
            "decode_responses": True,   # return str, not bytes
        }
        if config.REDIS_PASSWORD:
            kwargs["password"] = config.REDIS_PASSWORD
        _client = redis.Redis(**kwargs)
    return _client


def get_cached_attractions() -> list[dict] | None:
    """Return the cached wire-form catalogue, or None on cache miss."""
    val = get_redis().get(ATTRACTIONS_KEY)
    return json.loads(val) if val is not None else None


def set_cached_attractions(records: list[dict]) -> None:
    """Write the wire-form catalogue with ATTRACTIONS_CACHE_TTL expiry."""
    get_redis().setex(
        ATTRACTIONS_KEY,
        config.ATTRACTIONS_CACHE_TTL,
        json.dumps(records, ensure_ascii=False),
    )


def invalidate_attractions() -> int:
    """
    Drop the cached catalogue.

    Called after the Postgres table is reseeded.
    Returns: number of keys deleted (0 or 1).
    """
    return get_redis().delete(ATTRACTIONS_KEY)
