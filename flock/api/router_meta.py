"""
Meta endpoints: health, districts, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from flock.config import DISTRICTS, ALL_DISTRICTS
from flock.data.errors import FetchError, SchemaError
from flock.data.store import RosterStore
from flock.api.dependencies import get_store_or_empty
from flock.api.response_models import HealthResponse, DistrictsResponse, ReloadResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: RosterStore = Depends(get_store_or_empty)):
    info = store.health()
    status = "ok" if info["loaded"] and not info["last_error"] else "degraded"
    return HealthResponse(status=status, **info)


@router.get("/districts", response_model=DistrictsResponse)
def list_districts():
    return DistrictsResponse(districts=DISTRICTS, all=ALL_DISTRICTS)


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: RosterStore = Depends(get_store_or_empty)):
    """Re-fetch the sheet and replace the roster.

    Runs inline so the caller learns whether it worked; on failure the
    previous roster keeps being served.
    """
    try:
        store.load()
    except FetchError as e:
        raise HTTPException(502, str(e))
    except SchemaError as e:
        raise HTTPException(422, str(e))
    snap = store.snapshot
    return ReloadResponse(
        status="reloaded",
        members=snap.member_count,
        loaded_at=snap.loaded_at.isoformat() if snap.loaded_at else None,
    )
