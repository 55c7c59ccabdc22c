"""
Roster views — district filter, status/district tallies, table rows, member cards.

Every function takes the record collection as an argument and returns a new
value; nothing here keeps a reference to the records.

Two district rules coexist on purpose:
  * ``filter_by_district`` matches the district cell exactly ("ЦЕНТР 2" is not
    in "ЦЕНТР"),
  * ``aggregate_by_district`` falls back to a substring match ("ЦЕНТР 2" is
    counted under "ЦЕНТР").
The two can disagree on the same data; see DESIGN.md before unifying them.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pandas as pd

from flock.config import (
    DISTRICTS, ALL_DISTRICTS, ALL_DISTRICTS_LABEL,
    PRESBYTER_NAME, ALL_PRESBYTERS_LABEL,
    TABLE_LABELS, HIDDEN_COLUMNS,
)
from flock.analytics.common import pct_of_total
from flock.data.contact import classify_contact
from flock.data.normalize import strip_markup, preview_notes, preview_words, display_value
from flock.data.schemas import (
    DEFAULT_BOUNDARY, DEFAULT_LAYOUT,
    ContactStatus, GraceBoundary, MemberRecord, SheetLayout,
)


# ---------------------------------------------------------------------------
# District filter
# ---------------------------------------------------------------------------

def is_all_districts(district: Optional[str]) -> bool:
    if district is None:
        return True
    return district.upper().strip() in (ALL_DISTRICTS, ALL_DISTRICTS_LABEL)


def normalize_district(value: str) -> str:
    return (value or "").upper().strip()


def filter_by_district(
    records: Sequence[MemberRecord],
    district: Optional[str],
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> list[MemberRecord]:
    """Records whose district cell equals ``district`` (case/space-insensitive)."""
    if is_all_districts(district):
        return list(records)
    target = normalize_district(district)
    return [r for r in records if normalize_district(r.district(layout)) == target]


def match_district(value: str, districts: Iterable[str] = DISTRICTS) -> Optional[str]:
    """Known district for a raw cell: exact match first, then first substring hit."""
    cell = normalize_district(value)
    known = [normalize_district(d) for d in districts]
    if cell in known:
        return cell
    return next((d for d in known if d and d in cell), None)


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

def contact_result(
    record: MemberRecord,
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
):
    return classify_contact(record.contact_cell(layout), boundary)


def aggregate_status(
    records: Sequence[MemberRecord],
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> dict[ContactStatus, int]:
    """Count records per contact status. Every status is present."""
    counts = {status: 0 for status in ContactStatus}
    for r in records:
        counts[contact_result(r, boundary, layout).status] += 1
    return counts


def aggregate_by_district(
    records: Sequence[MemberRecord],
    layout: SheetLayout = DEFAULT_LAYOUT,
    districts: Iterable[str] = DISTRICTS,
) -> dict[str, int]:
    """Count records per known district; unmatched district cells are dropped."""
    districts = [normalize_district(d) for d in districts]
    counts = {d: 0 for d in districts}
    for r in records:
        hit = match_district(r.district(layout), districts)
        if hit is not None:
            counts[hit] += 1
    return counts


def status_summary(
    records: Sequence[MemberRecord],
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> list[dict]:
    """Status counts with share of total, in FRESH/STALE/MISSING order."""
    counts = aggregate_status(records, boundary, layout)
    total = sum(counts.values())
    return [
        {
            "status": status.value,
            "count": count,
            "pct": pct_of_total(count, total),
            "color": status.color,
        }
        for status, count in counts.items()
    ]


def records_frame(
    records: Sequence[MemberRecord],
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
    districts: Iterable[str] = DISTRICTS,
) -> pd.DataFrame:
    """One row per member: id, name, district (matched), status, last contact.

    Unmatched districts are None (object column).
    """
    districts = list(districts)
    results = [contact_result(r, boundary, layout) for r in records]
    return pd.DataFrame({
        "id": [r.id for r in records],
        "name": [strip_markup(r.name(layout)) for r in records],
        "district": pd.Series(
            [match_district(r.district(layout), districts) for r in records], dtype=object
        ),
        "status": [res.status.value for res in results],
        "last_contact": pd.Series([res.last_valid_date for res in results], dtype=object),
    })


def district_status_table(
    records: Sequence[MemberRecord],
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
    districts: Iterable[str] = DISTRICTS,
) -> list[dict]:
    """District × status counts (districts by the loose aggregate rule)."""
    districts = [normalize_district(d) for d in districts]
    statuses = [s.value for s in ContactStatus]
    df = records_frame(records, boundary, layout, districts).dropna(subset=["district"])

    table = pd.crosstab(df["district"], df["status"]) if not df.empty else pd.DataFrame()
    table = table.reindex(index=districts, columns=statuses, fill_value=0)

    result = []
    for district, row in table.iterrows():
        total = int(row.sum())
        entry = {"district": district, "total": total}
        for s in statuses:
            entry[s.lower()] = int(row[s])
        entry["fresh_pct"] = pct_of_total(entry["fresh"], total)
        result.append(entry)
    return result


# ---------------------------------------------------------------------------
# Rendering-layer projections
# ---------------------------------------------------------------------------

def presbyter_label(district: Optional[str]) -> str:
    if is_all_districts(district):
        return ALL_PRESBYTERS_LABEL
    return PRESBYTER_NAME


def _visible_columns(width: int) -> list[int]:
    return [i for i in range(width) if i not in HIDDEN_COLUMNS]


def roster_row(
    number: int,
    record: MemberRecord,
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> dict:
    """Table row for the rendering layer: display cells plus contact status."""
    result = contact_result(record, boundary, layout)
    cells = []
    for pos, col in enumerate(_visible_columns(len(record.values))):
        label = TABLE_LABELS[pos] if pos < len(TABLE_LABELS) else f"#{col}"
        raw = record.values[col]
        title = strip_markup(raw)
        if col == layout.contact_col:
            if result.tokens and result.last_valid_date is None:
                value = result.raw_text
            else:
                value = " / ".join(result.tokens) if result.tokens else "-"
            title = result.tooltip
        elif col == layout.fields.get("notes"):
            value = preview_notes(raw)
        elif col == layout.fields.get("service"):
            value = preview_words(raw)
        else:
            value = display_value(raw)
        cells.append({"column": col, "label": label, "value": value, "title": title})

    return {
        "number": number,
        "id": record.id,
        "name": strip_markup(record.name(layout)),
        "district": record.district(layout),
        "status": result.status.value,
        "color": result.color,
        "tokens": result.display_tokens,
        "tooltip": result.tooltip,
        "last_contact": result.last_valid_date,
        "cells": cells,
    }


def roster_rows(
    records: Sequence[MemberRecord],
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> list[dict]:
    """Numbered (1-based) table rows in roster order."""
    return [roster_row(i, r, boundary, layout) for i, r in enumerate(records, 1)]


def member_card(
    record: MemberRecord,
    boundary: GraceBoundary = DEFAULT_BOUNDARY,
    layout: SheetLayout = DEFAULT_LAYOUT,
) -> dict:
    """Personal card: every named field, markup stripped, plus contact status."""
    card = {name: strip_markup(record.get(name, layout)) for name in layout.fields}
    result = contact_result(record, boundary, layout)
    card.update({
        "id": record.id,
        "status": result.status.value,
        "color": result.color,
        "last_contact_date": result.last_valid_date,
    })
    return card
