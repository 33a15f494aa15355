"""
db/
----
Database access layer for the Rugby Heritage Explorer.

Storage architecture:
  PostgreSQL (psycopg2) — persistent attraction catalogue
    table : attractions
    schema: db/schema.sql
    apply : python scripts/run_migrations.py
    seed  : python scripts/seed_attractions.py

  Redis (redis-py) — volatile catalogue cache
    attractions:all   TTL = ATTRACTIONS_CACHE_TTL

Public exports (import from here for convenience):
    from db import get_conn, get_redis
    from db.repositories import attraction_repo
"""

from db.connection import get_conn, close_pool
from db.redis_client import get_redis

__all__ = ["get_conn", "close_pool", "get_redis"]
