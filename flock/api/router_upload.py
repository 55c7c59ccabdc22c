"""
Upload endpoint: ingest a CSV export posted by the user instead of fetching.
Nothing is written to disk; the roster lives only in memory.
"""
from __future__ import annotations

import gzip

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File

from flock.data.errors import SchemaError
from flock.data.store import RosterStore
from flock.api.dependencies import get_store_or_empty
from flock.api.response_models import UploadResponse

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=UploadResponse)
async def upload_csv(
    file: UploadFile = File(...),
    store: RosterStore = Depends(get_store_or_empty),
):
    """Replace the roster with an uploaded CSV (optionally .csv.gz)."""
    if not file.filename:
        raise HTTPException(400, "Missing filename")

    filename = file.filename
    is_gzipped = filename.lower().endswith(".csv.gz")
    if is_gzipped:
        filename = filename[:-3]
    if not filename.lower().endswith(".csv"):
        raise HTTPException(400, f"Only .csv files are accepted (got '{file.filename}')")

    content = await file.read()
    try:
        if is_gzipped:
            content = gzip.decompress(content)
        text = content.decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise HTTPException(400, f"Could not read '{file.filename}': {e}")

    try:
        snapshot = store.ingest_text(text, source=f"upload:{filename}")
    except SchemaError as e:
        raise HTTPException(422, str(e))

    return UploadResponse(
        status="uploaded",
        filename=filename,
        members=snapshot.member_count,
        rows=snapshot.row_count,
    )
