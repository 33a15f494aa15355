"""
db/repositories/attraction_repo.py
-----------------------------------
Read/write operations for the `attractions` table (db/schema.sql).

All functions accept a psycopg2 connection object.
Commit/rollback is managed by the caller via db.connection.get_conn().
Rows are returned in the camelCase wire form understood by
Attraction.from_dict().
"""

from __future__ import annotations

from typing import Any

_COLUMNS = """
    id, name, description, entrance_fee, directions,
    images, video, location_lat, location_lon, type
"""


def _row_to_record(cols: list[str], row: tuple) -> dict[str, Any]:
    r = dict(zip(cols, row))
    record = {
        "id":          r["id"],
        "name":        r["name"],
        "description": r["description"],
        "entranceFee": r["entrance_fee"],
        "directions":  r["directions"],
        "images":      list(r["images"] or []),
        "coordinates": [r["location_lat"], r["location_lon"]],
        "type":        r["type"],
    }
    if r["video"]:
        record["video"] = r["video"]
    return record


def get_all_attractions(conn) -> list[dict]:
    """Return every attraction ordered by id."""
    sql = f"SELECT {_COLUMNS} FROM attractions ORDER BY id"
    with conn.cursor() as cur:
        cur.execute(sql)
        cols = [d[0] for d in cur.description]
        return [_row_to_record(cols, row) for row in cur.fetchall()]


def upsert_attraction(conn, record: dict[str, Any]) -> int:
    """
    Insert or update one attraction from its wire-form dict.

    On conflict (same id) every column is overwritten and updated_at
    refreshed. Returns the id.
    """
    lat, lon = record["coordinates"]
    row = {
        "id":           record["id"],
        "name":         record["name"],
        "description":  record.get("description", ""),
        "entrance_fee": record.get("entranceFee", ""),
        "directions":   record.get("directions", ""),
        "images":       list(record.get("images") or []),
        "video":        record.get("video"),
        "location_lat": lat,
        "location_lon": lon,
        "type":         record["type"],
    }
    sql = """
        INSERT INTO attractions (
            id, name, description, entrance_fee, directions,
            images, video, location_lat, location_lon, type
        ) VALUES (
            %(id)s, %(name)s, %(description)s, %(entrance_fee)s, %(directions)s,
            %(images)s, %(video)s, %(location_lat)s, %(location_lon)s, %(type)s
        )
        ON CONFLICT (id) DO UPDATE SET
            name         = EXCLUDED.name,
            description  = EXCLUDED.description,
            entrance_fee = EXCLUDED.entrance_fee,
            directions   = EXCLUDED.directions,
            images       = EXCLUDED.images,
            video        = EXCLUDED.video,
            location_lat = EXCLUDED.location_lat,
            location_lon = EXCLUDED.location_lon,
            type         = EXCLUDED.type,
            updated_at   = NOW()
        RETURNING id
    """
    with conn.cursor() as cur:
        cur.execute(sql, row)
        return int(cur.fetchone()[0])


def delete_attractions_not_in(conn, keep_ids: list[int]) -> int:
    """
    Delete attractions whose id is not in `keep_ids`.

    Used by the seed script to make the table mirror the catalogue.
    Returns count of deleted rows.
    """
    sql = "DELETE FROM attractions WHERE NOT (id = ANY(%s))"
    with conn.cursor() as cur:
        cur.execute(sql, (list(keep_ids),))
        return cur.rowcount
