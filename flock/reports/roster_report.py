"""
Roster Report — member list with contact traffic light, statistics, legend.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from flock.config import CHURCH_TITLE, STATUS_LEGEND
from flock.data.store import RosterStore
from flock.data.schemas import GraceBoundary
from flock.analytics.views import (
    filter_by_district,
    is_all_districts,
    member_card,
    presbyter_label,
    status_summary,
    aggregate_by_district,
    district_status_table,
)
from flock.analytics.common import sanitize_for_json
from flock.excel.writer import ExcelWriter


ROSTER_COLUMNS = [
    ("number", "number", "№"),
    ("full_name", "name", "ПІБ"),
    ("district", "text", "Район"),
    ("last_contact", "status", "Дати контактів"),
    ("last_contact_date", "text", "Останній контакт"),
    ("status", "text", "Статус"),
    ("phone", "text", "Телефон"),
    ("care", "text", "Опіка"),
    ("service", "text", "Служіння"),
    ("address", "text", "Адрес"),
]

STATS_COLUMNS = [
    ("district", "text", "Район"),
    ("total", "number", "Всього"),
    ("fresh", "number", "FRESH"),
    ("stale", "number", "STALE"),
    ("missing", "number", "MISSING"),
    ("fresh_pct", "percent", "% FRESH"),
]


def generate_json(
    store: RosterStore,
    district: Optional[str] = None,
    boundary: GraceBoundary | None = None,
) -> dict:
    boundary = boundary or store.boundary
    records = filter_by_district(store.records, district, store.layout)

    members = []
    for i, r in enumerate(records, 1):
        card = member_card(r, boundary, store.layout)
        card["number"] = i
        members.append(card)

    return {
        "district": "ALL" if is_all_districts(district) else district.upper().strip(),
        "presbyter": presbyter_label(district),
        "boundary": boundary.label,
        "member_count": len(records),
        "loaded_at": store.snapshot.loaded_at,
        "members": members,
        "status_summary": status_summary(records, boundary, store.layout),
        "by_district": aggregate_by_district(store.records, store.layout),
        "district_status": district_status_table(store.records, boundary, store.layout),
    }


def build_workbook(
    store: RosterStore,
    district: Optional[str] = None,
    boundary: GraceBoundary | None = None,
) -> ExcelWriter:
    data = generate_json(store, district, boundary)
    ew = ExcelWriter()

    ws = ew.add_sheet("Список")
    subtitle = (f"Район: {data['district']}  |  Пресвітер: {data['presbyter']}  |  "
                f"Членів: {data['member_count']}  |  Період з {data['boundary']}")
    ew.write_title(ws, CHURCH_TITLE, subtitle, merge_cols=len(ROSTER_COLUMNS))
    ew.write_table(ws, 4, ROSTER_COLUMNS, data["members"], status_key="status")

    ws2 = ew.add_sheet("Стат-ка")
    ew.write_title(ws2, "СТАТИСТИКА КОНТАКТІВ", f"Період з {data['boundary']}", merge_cols=6)
    counts = {s["status"]: s for s in data["status_summary"]}
    row = ew.write_kpi_row(ws2, 4, [
        (data["member_count"], "Членів", "number"),
        (counts["FRESH"]["pct"], "FRESH", "percent"),
        (counts["STALE"]["pct"], "STALE", "percent"),
        (counts["MISSING"]["pct"], "MISSING", "percent"),
    ])
    row = ew.write_section(ws2, row, "ПО РАЙОНАХ")
    row = ew.write_table(ws2, row, STATS_COLUMNS, data["district_status"],
                         freeze=False, show_total=True)
    row = ew.write_section(ws2, row + 1, "ЛЕГЕНДА")
    ew.write_legend(ws2, row, STATUS_LEGEND)

    return ew


def generate_excel(
    store: RosterStore,
    output_path: str | Path,
    district: Optional[str] = None,
    boundary: GraceBoundary | None = None,
) -> Path:
    return build_workbook(store, district, boundary).save(output_path)


def generate_safe_json(store: RosterStore, district: Optional[str] = None,
                       boundary: GraceBoundary | None = None) -> dict:
    """generate_json with dates/numpy values converted for JSON responses."""
    return sanitize_for_json(generate_json(store, district, boundary))
