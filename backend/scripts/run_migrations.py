#!/usr/bin/env python
"""
scripts/run_migrations.py
--------------------------
Applies db/schema.sql to the configured Postgres database.

Usage:
    python scripts/run_migrations.py [--dry-run]

Exit codes:
    0 — migrations applied successfully (or dry-run completed)
    1 — connection failed or SQL error

Environment variables (all have defaults):
    POSTGRES_HOST, POSTGRES_PORT, POSTGRES_DB, POSTGRES_USER, POSTGRES_PASSWORD
    (same vars used by db/connection.py)

Re-running is idempotent: every statement uses IF NOT EXISTS. All statements
run in one transaction.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import re
import sys

# Add the backend directory to sys.path so that config is importable
_BACKEND_DIR = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_BACKEND_DIR))

import psycopg2  # noqa: E402

import config  # noqa: E402
from db.connection import connect_kwargs  # noqa: E402

logger = logging.getLogger("migrations")

_SQL_FILE = _BACKEND_DIR / "db" / "schema.sql"


def _read_sql() -> str:
    if not _SQL_FILE.exists():
        raise FileNotFoundError(f"SQL file not found: {_SQL_FILE}")
    return _SQL_FILE.read_text(encoding="utf-8")


def strip_comments(sql: str) -> str:
    """Remove /* ... */ block comments and -- line comments."""
    sql = re.sub(r"/\*.*?\*/", "", sql, flags=re.DOTALL)
    return re.sub(r"--[^\n]*", "", sql)


def split_statements(sql: str) -> list[str]:
    """Split on semicolons; return non-empty statements."""
    return [s.strip() for s in sql.split(";") if s.strip()]


def run(dry_run: bool = False) -> None:
    statements = split_statements(strip_comments(_read_sql()))

    logger.info("SQL file   : %s", _SQL_FILE)
    logger.info("Statements : %d", len(statements))
    logger.info("Target DB  : %s @ %s:%s",
                config.POSTGRES_DB, config.POSTGRES_HOST, config.POSTGRES_PORT)

    if dry_run:
        logger.info("DRY-RUN — no changes applied.")
        for i, stmt in enumerate(statements, 1):
            logger.info("  [%03d] %s...", i, stmt[:80].replace("\n", " "))
        return

    conn = psycopg2.connect(**connect_kwargs())
    conn.autocommit = False
    try:
        with conn.cursor() as cur:
            for i, stmt in enumerate(statements, 1):
                try:
                    cur.execute(stmt)
                except psycopg2.Error as exc:
                    logger.error("Statement %d failed: %s", i, exc.pgerror or exc)
                    raise
                logger.info("  applied: %s", stmt[:60].replace("\n", " "))
        conn.commit()
        logger.info("Done — %d statements applied.", len(statements))
    except Exception:
        conn.rollback()
        logger.error("ROLLED BACK due to error.")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="[%(name)s] %(message)s")
    parser = argparse.ArgumentParser(description="Apply Postgres schema migrations.")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print statements without executing them.",
    )
    args = parser.parse_args()
    try:
        run(dry_run=args.dry_run)
    except Exception as exc:
        logger.error("ERROR: %s", exc)
        sys.exit(1)
