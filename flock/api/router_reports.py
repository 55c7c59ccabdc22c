"""
Report endpoints — roster report as JSON or an Excel download.
"""
from __future__ import annotations

import io
from urllib.parse import quote
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, StreamingResponse

from flock.data.store import RosterStore
from flock.data.schemas import GraceBoundary
from flock.api.dependencies import get_store, parse_district, parse_boundary
from flock.reports import roster_report

router = APIRouter(prefix="/api/reports", tags=["reports"])

_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/roster")
def roster_json(
    store: RosterStore = Depends(get_store),
    district: Optional[str] = Depends(parse_district),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    return JSONResponse(content=roster_report.generate_safe_json(store, district, boundary))


@router.get("/roster/excel")
def roster_excel(
    store: RosterStore = Depends(get_store),
    district: Optional[str] = Depends(parse_district),
    boundary: Optional[GraceBoundary] = Depends(parse_boundary),
):
    """Download the roster workbook, built in memory."""
    ew = roster_report.build_workbook(store, district, boundary)
    suffix = quote(district or "ALL", safe="")
    return StreamingResponse(
        io.BytesIO(ew.to_bytes()),
        media_type=_XLSX,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''Roster_{suffix}.xlsx"},
    )
