"""
Roster ingestion: CSV text → member records → snapshot.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Sequence

from flock.data.errors import FetchError, SchemaError
from flock.data.schemas import DEFAULT_LAYOUT, MemberRecord, RosterSnapshot, SheetLayout
from flock.data.tokenizer import tokenize


# ---------------------------------------------------------------------------
# Row classification
# ---------------------------------------------------------------------------

def _name_cell(row: Sequence[str], layout: SheetLayout) -> str:
    return row[layout.name_col] if layout.name_col < len(row) else ""


def is_header_row(index: int, row: Sequence[str], layout: SheetLayout = DEFAULT_LAYOUT) -> bool:
    """True for the first row and for rows whose name cell is a header artifact.

    Only the name column is inspected; the rest of the row is not validated.
    """
    if index == 0:
        return True
    lowered = _name_cell(row, layout).lower().strip()
    return (
        lowered == layout.header_name_label
        or layout.photo_marker in lowered
        or lowered == ""
    )


def build_records(
    rows: Sequence[Sequence[str]],
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> list[MemberRecord]:
    """Keep the rows that look like real members, tagged with their row index."""
    records: list[MemberRecord] = []
    for i, row in enumerate(rows):
        if len(row) < layout.min_columns:
            continue
        if is_header_row(i, row, layout):
            continue
        if len(_name_cell(row, layout).strip()) <= layout.min_name_length:
            continue
        records.append(MemberRecord(id=i, values=tuple(row)))
    return records


# ---------------------------------------------------------------------------
# Schema check
# ---------------------------------------------------------------------------

def validate_header(header: Sequence[str], layout: SheetLayout = DEFAULT_LAYOUT) -> None:
    """Raise SchemaError when the sheet is too narrow for the configured columns."""
    if len(header) < layout.required_columns:
        raise SchemaError(
            f"Roster sheet has {len(header)} columns, layout needs at least "
            f"{layout.required_columns} (district={layout.district_col}, "
            f"name={layout.name_col}, contact={layout.contact_col})"
        )


# ---------------------------------------------------------------------------
# Snapshot building
# ---------------------------------------------------------------------------

def parse_roster(
    text: str,
    source: str = "",
    layout: SheetLayout = DEFAULT_LAYOUT,
    now: dt.datetime | None = None,
) -> RosterSnapshot:
    """Tokenize, validate and build a complete snapshot from CSV text.

    Empty input gives an empty snapshot; a header narrower than the layout
    raises SchemaError.
    """
    rows = tokenize(text)
    headers: tuple[str, ...] = ()
    if rows:
        validate_header(rows[0], layout)
        headers = tuple(rows[0])

    records = build_records(rows, layout)
    return RosterSnapshot(
        headers=headers,
        records=tuple(records),
        loaded_at=now or dt.datetime.now(),
        source=source,
        row_count=len(rows),
    )


def load_csv_file(filepath: Path, layout: SheetLayout = DEFAULT_LAYOUT) -> RosterSnapshot:
    """Build a snapshot from a CSV export saved on disk."""
    try:
        text = Path(filepath).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FetchError(f"Could not read roster CSV {filepath}: {e}", url=str(filepath)) from e
    return parse_roster(text, source=str(filepath), layout=layout)
