"""
api/server.py
-------------
FastAPI application entry point.

Run dev server:
    cd backend
    uvicorn api.server:app --reload --port 8000

Endpoints:
    GET    /attractions
    GET    /attractions/{attraction_id}
    GET    /v1/health
    POST   /v1/explorer/sessions
    GET    /v1/explorer/sessions/{session_id}
    POST   /v1/explorer/sessions/{session_id}/search
    POST   /v1/explorer/sessions/{session_id}/markers/{attraction_id}/click
    POST   /v1/explorer/sessions/{session_id}/close
    POST   /v1/explorer/sessions/{session_id}/add-to-trip
    POST   /v1/explorer/sessions/{session_id}/view-more
    POST   /v1/explorer/sessions/{session_id}/slideshow/next
    POST   /v1/explorer/sessions/{session_id}/slideshow/previous
    DELETE /v1/explorer/sessions/{session_id}
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from api.routes import attractions, explorer, health

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Rugby Heritage Explorer API",
    version="1.0.0",
    description=(
        "Rugby-heritage attractions of South Africa: catalogue endpoint plus "
        "explorer page sessions (map markers, search, detail sidebar)."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Allow the explorer frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        f"http://localhost:{config.FRONTEND_PORT}",
        f"http://127.0.0.1:{config.FRONTEND_PORT}",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(attractions.router, prefix="/attractions",  tags=["Attractions"])
app.include_router(health.router,      prefix="/v1",           tags=["Health"])
app.include_router(explorer.router,    prefix="/v1/explorer",  tags=["Explorer"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host="0.0.0.0", port=config.API_PORT, reload=True)
