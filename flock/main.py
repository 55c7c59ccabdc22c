"""
Flock — FastAPI app factory with startup roster ingestion.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flock.data.errors import IngestError
from flock.data.store import RosterStore
from flock.api.dependencies import set_store
from flock.api.router_meta import router as meta_router
from flock.api.router_members import router as members_router
from flock.api.router_stats import router as stats_router
from flock.api.router_upload import router as upload_router
from flock.api.router_reports import router as reports_router


def _startup_load(store: RosterStore) -> None:
    """First ingestion. A failure is reported but does not stop the server."""
    from flock.config import SHEET_ID, SHEET_NAME, CSV_URL
    print(f"  Sheet source = {CSV_URL or f'{SHEET_ID} / {SHEET_NAME}'}")
    print(f"  Grace boundary = {store.boundary.label}")
    try:
        store.load()
    except IngestError as e:
        print(f"\nFlock started without data — {e}. Use POST /api/reload or /api/upload.\n")
        return
    print(f"\nFlock ready — {store.member_count():,} members\n")


def create_app(store: RosterStore | None = None, load_on_startup: bool = True) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the store and load the roster at startup."""
        active = store or RosterStore()
        set_store(active)
        if load_on_startup:
            _startup_load(active)
        yield

    app = FastAPI(
        title="Flock API",
        description="Church member roster — districts, personal cards, pastoral contact freshness",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(members_router)
    app.include_router(stats_router)
    app.include_router(upload_router)
    app.include_router(reports_router)

    return app


app = create_app()
