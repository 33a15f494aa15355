"""
config.py
---------
Central configuration for the Rugby Heritage Explorer.
All values loaded from environment variables with local-dev defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory (if it exists) so env vars in that file
# are picked up by os.getenv() below.  Won't override vars already set in the shell.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ── Service ───────────────────────────────────────────────────────────────────
SERVICE_NAME: str = "rugby-heritage-explorer"
API_PORT: int      = int(os.getenv("API_PORT", "8000"))
# Port the explorer UI is served from in development (CORS allow-list entry)
FRONTEND_PORT: int = int(os.getenv("FRONTEND_PORT", "3000"))
LOG_LEVEL: str     = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Attraction data source ────────────────────────────────────────────────────
# "static"   → built-in catalogue (no external services)
# "postgres" → attractions table (apply db/schema.sql, run scripts/seed_attractions.py)
# "remote"   → another instance of this API at API_BASE_URL
ATTRACTION_SOURCE: str = os.getenv("ATTRACTION_SOURCE", "static").lower()

# Base URL used by RemoteAttractionSource, e.g. "http://localhost:8000"
API_BASE_URL: str         = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
API_REQUEST_TIMEOUT: int  = int(os.getenv("API_REQUEST_TIMEOUT", "10"))

# Redis cache in front of the selected source
ATTRACTIONS_CACHE_ENABLED: bool = _flag("ATTRACTIONS_CACHE_ENABLED", "false")
ATTRACTIONS_CACHE_TTL: int      = int(os.getenv("ATTRACTIONS_CACHE_TTL", "3600"))   # 1 hour

# ── Map view ──────────────────────────────────────────────────────────────────
# Default wide view: centred on South Africa
MAP_DEFAULT_CENTER: tuple[float, float] = (
    float(os.getenv("MAP_DEFAULT_LAT", "-28.4793")),
    float(os.getenv("MAP_DEFAULT_LON", "24.6727")),
)
MAP_DEFAULT_ZOOM: int   = int(os.getenv("MAP_DEFAULT_ZOOM", "5"))
MAP_HIGHLIGHT_ZOOM: int = int(os.getenv("MAP_HIGHLIGHT_ZOOM", "13"))
MAP_TILE_URL: str = os.getenv(
    "MAP_TILE_URL", "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
)
MAP_TILE_ATTRIBUTION: str = os.getenv(
    "MAP_TILE_ATTRIBUTION",
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
)
# Prefix for marker icon URLs (icons themselves are static assets)
MAP_ICON_BASE_URL: str = os.getenv("MAP_ICON_BASE_URL", "/assets/icons").rstrip("/")

# ── Observability ─────────────────────────────────────────────────────────────
# When true, explorer interactions are appended to logs/<session_id>.jsonl
INTERACTION_LOG_ENABLED: bool = _flag("INTERACTION_LOG_ENABLED", "false")

# ── PostgreSQL ────────────────────────────────────────────────────────────────
# Schema defined in db/schema.sql
# Apply with: python scripts/run_migrations.py
POSTGRES_HOST: str     = os.getenv("POSTGRES_HOST",     "localhost")
POSTGRES_PORT: int     = int(os.getenv("POSTGRES_PORT", "5432"))
POSTGRES_DB: str       = os.getenv("POSTGRES_DB",       "rugby_heritage")
POSTGRES_USER: str     = os.getenv("POSTGRES_USER",     "rugby_user")
POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "rugby_pass")
POSTGRES_MIN_CONN: int = int(os.getenv("POSTGRES_MIN_CONN", "1"))
POSTGRES_MAX_CONN: int = int(os.getenv("POSTGRES_MAX_CONN", "10"))

# ── Redis ─────────────────────────────────────────────────────────────────────
REDIS_HOST: str     = os.getenv("REDIS_HOST",     "localhost")
REDIS_PORT: int     = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB: int       = int(os.getenv("REDIS_DB",   "0"))
REDIS_PASSWORD: str = os.getenv("REDIS_PASSWORD", "")
