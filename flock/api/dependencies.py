"""
FastAPI dependencies — RosterStore singleton, district and boundary parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from flock.config import DISTRICTS
from flock.data.store import RosterStore
from flock.data.schemas import GraceBoundary
from flock.analytics.views import is_all_districts, normalize_district

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: RosterStore | None = None


def set_store(store: RosterStore) -> None:
    global _store
    _store = store


def get_store() -> RosterStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Roster not loaded yet")
    return _store


def get_store_or_empty() -> RosterStore:
    """Return the store even if nothing was ingested yet (health/reload/upload)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Query params
# ---------------------------------------------------------------------------

def parse_district(
    district: Optional[str] = Query(None, description="District name, or ALL / ВСІ"),
) -> Optional[str]:
    """Validate a district filter against the known set. None means all."""
    if district is None or is_all_districts(district):
        return None
    value = normalize_district(district)
    if value not in {normalize_district(d) for d in DISTRICTS}:
        raise HTTPException(400, f"Unknown district: {district}. Valid: {DISTRICTS + ['ALL']}")
    return value


def parse_boundary(
    boundary: Optional[str] = Query(None, description="Grace boundary YYYY-MM"),
) -> Optional[GraceBoundary]:
    if boundary is None:
        return None
    try:
        return GraceBoundary.parse(boundary)
    except ValueError as e:
        raise HTTPException(400, str(e))
