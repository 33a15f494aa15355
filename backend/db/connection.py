"""
db/connection.py
-----------------
psycopg2 ThreadedConnectionPool — singleton, shared across the process.

Usage:
    from db.connection import get_conn
    from db.repositories import attraction_repo

    with get_conn() as conn:
        rows = attraction_repo.get_all_attractions(conn)

The context manager borrows a connection from the pool, commits on clean
exit, rolls back on exception, and returns the connection to the pool.

Environment variables (set in config.py):
    POSTGRES_HOST       default: localhost
    POSTGRES_PORT       default: 5432
    POSTGRES_DB         default: rugby_heritage
    POSTGRES_USER       default: rugby_user
    POSTGRES_PASSWORD   default: rugby_pass
    POSTGRES_MIN_CONN   default: 1
    POSTGRES_MAX_CONN   default: 10
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

import psycopg2
import psycopg2.pool

import config

logger = logging.getLogger(__name__)

# Initialised lazily on first call to get_conn()
_pool: psycopg2.pool.ThreadedConnectionPool | None = None


def connect_kwargs() -> dict:
    """psycopg2.connect() keyword arguments built from config."""
    return {
        "host":     config.POSTGRES_HOST,
        "port":     config.POSTGRES_PORT,
        "dbname":   config.POSTGRES_DB,
        "user":     config.POSTGRES_USER,
        "password": config.POSTGRES_PASSWORD,
    }


def get_pool() -> psycopg2.pool.ThreadedConnectionPool:
    """Return the singleton connection pool, creating it on first call."""
    global _pool
    if _pool is None or _pool.closed:
        logger.info(
            "Opening Postgres pool %s@%s:%s",
            config.POSTGRES_DB, config.POSTGRES_HOST, config.POSTGRES_PORT,
        )
        _pool = psycopg2.pool.ThreadedConnectionPool(
            minconn=config.POSTGRES_MIN_CONN,
            maxconn=config.POSTGRES_MAX_CONN,
            **connect_kwargs(),
        )
    return _pool


@contextmanager
def get_conn() -> Generator:
    """
    Borrow a psycopg2 connection from the pool.

    On success: commits. On exception: rolls back and re-raises.
    Always: returns the connection to the pool.
    """
    pool = get_pool()
    conn = pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool (called at application shutdown)."""
    global _pool
    if _pool and not _pool.closed:
        _pool.closeall()
    _pool = None
