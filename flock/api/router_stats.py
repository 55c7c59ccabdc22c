"""
Statistics endpoints — contact status tallies and district counts.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from flock.data.store import RosterStore
from flock.data.schemas import GraceBoundary
from flock.api.dependencies import get_store, parse_district, parse_boundary
from flock.api.response_models import StatusStatsResponse, DistrictStatsResponse, DistrictStatusRow
from flock.analytics.views import (
    filter_by_district,
    status_summary,
    aggregate_by_district,
    district_status_table,
)

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("/status", response_model=StatusStatsResponse)
def status_stats(
    store: RosterStore = Depends(get_store),
    district: Optional[str] = Depends(parse_district),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    """FRESH / STALE / MISSING counts for a district (exact match) or everyone."""
    boundary = boundary or store.boundary
    records = filter_by_district(store.records, district, store.layout)
    return StatusStatsResponse(
        district=district or "ALL",
        boundary=boundary.label,
        total=len(records),
        statuses=status_summary(records, boundary, store.layout),
    )


@router.get("/districts", response_model=DistrictStatsResponse)
def district_stats(store: RosterStore = Depends(get_store)):
    """Members per district. Uses the loose rule: "ЦЕНТР 2" counts as ЦЕНТР."""
    counts = aggregate_by_district(store.records, store.layout)
    return DistrictStatsResponse(districts=counts, total=sum(counts.values()))


@router.get("/table", response_model=list[DistrictStatusRow])
def district_status(
    store: RosterStore = Depends(get_store),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    """District × status matrix."""
    return district_status_table(store.records, boundary or store.boundary, store.layout)
