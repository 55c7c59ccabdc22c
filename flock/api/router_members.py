"""
Member endpoints — district roster table and personal cards.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from flock.data.store import RosterStore
from flock.data.schemas import GraceBoundary
from flock.api.dependencies import get_store, parse_district, parse_boundary
from flock.api.response_models import MembersResponse, MemberCard
from flock.analytics.views import filter_by_district, roster_rows, member_card, presbyter_label

router = APIRouter(prefix="/api/members", tags=["members"])


@router.get("", response_model=MembersResponse)
def list_members(
    store: RosterStore = Depends(get_store),
    district: Optional[str] = Depends(parse_district),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    """Roster rows for one district (exact match) or everyone."""
    boundary = boundary or store.boundary
    records = filter_by_district(store.records, district, store.layout)
    return MembersResponse(
        district=district or "ALL",
        presbyter=presbyter_label(district),
        boundary=boundary.label,
        count=len(records),
        members=roster_rows(records, boundary, store.layout),
    )


@router.get("/{member_id}", response_model=MemberCard)
def get_member(
    member_id: int,
    store: RosterStore = Depends(get_store),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    """Personal card for one member, addressed by source row index."""
    record = store.get_member(member_id)
    if record is None:
        raise HTTPException(404, f"Member not found: {member_id}")
    return MemberCard(**member_card(record, boundary or store.boundary, store.layout))
