#!/usr/bin/env python
"""
scripts/seed_attractions.py
----------------------------
Loads the built-in rugby-heritage catalogue into the `attractions` table.

For the catalogue it:
  1. Validates every record (id, name, coordinate range, type)
  2. Drops records whose id repeats an earlier one
  3. Upserts the survivors into Postgres
  4. Optionally (--prune) deletes rows not present in the catalogue
  5. Invalidates the Redis catalogue cache

Usage:
    cd backend
    python scripts/run_migrations.py
    python scripts/seed_attractions.py
    python scripts/seed_attractions.py --prune
    python scripts/seed_attractions.py --dry-run

Options:
    --prune    Delete table rows whose id is not in the catalogue
    --dry-run  Validate and print a summary; touch neither Postgres nor Redis
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

# ── Make sure backend root is on path ─────────────────────────────────────────
_SCRIPT_DIR  = os.path.dirname(os.path.abspath(__file__))
_BACKEND_DIR = os.path.dirname(_SCRIPT_DIR)
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

import redis  # noqa: E402

import config  # noqa: E402  (must come after sys.path fix)
from db import redis_client  # noqa: E402
from db.connection import get_conn  # noqa: E402
from db.repositories import attraction_repo  # noqa: E402
from modules.catalog.static_catalog import STATIC_ATTRACTIONS  # noqa: E402
from modules.validation import filter_valid, unique_by_id, validate_attraction  # noqa: E402

logger = logging.getLogger("seed")


def clean_catalogue(records: list[dict]) -> list[dict]:
    """Validated, id-unique copy of `records`."""
    valid = filter_valid(records, validate_attraction)
    return unique_by_id(valid, key=lambda r: r["id"])


def run(prune: bool = False, dry_run: bool = False) -> int:
    records = clean_catalogue(STATIC_ATTRACTIONS)
    logger.info("%d/%d catalogue records passed validation", len(records), len(STATIC_ATTRACTIONS))

    if dry_run:
        for r in records:
            lat, lon = r["coordinates"]
            logger.info("  [%3d] %-40s %-10s (%.4f, %.4f)", r["id"], r["name"], r["type"], lat, lon)
        logger.info("DRY-RUN — nothing written.")
        return len(records)

    with get_conn() as conn:
        for r in records:
            attraction_repo.upsert_attraction(conn, r)
        if prune:
            deleted = attraction_repo.delete_attractions_not_in(conn, [r["id"] for r in records])
            logger.info("Pruned %d stale rows", deleted)
    logger.info("Upserted %d attractions into %s", len(records), config.POSTGRES_DB)

    try:
        redis_client.invalidate_attractions()
    except redis.RedisError as exc:
        logger.warning("Could not invalidate Redis cache: %s", exc)

    return len(records)


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="[%(name)s] %(message)s")
    parser = argparse.ArgumentParser(description="Seed the attractions table.")
    parser.add_argument("--prune", action="store_true",
                        help="Delete rows whose id is not in the catalogue.")
    parser.add_argument("--dry-run", action="store_true",
                        help="Validate only; write nothing.")
    args = parser.parse_args()
    try:
        run(prune=args.prune, dry_run=args.dry_run)
    except Exception as exc:
        logger.error("ERROR: %s", exc)
        sys.exit(1)
