import datetime as dt

import pandas as pd
import pytest

from flock.analytics.views import (
    filter_by_district,
    aggregate_status,
    aggregate_by_district,
    status_summary,
    district_status_table,
    records_frame,
    match_district,
    presbyter_label,
    roster_rows,
    member_card,
)
from flock.data.schemas import ContactStatus, GraceBoundary, MemberRecord, SheetLayout


def _member(id_: int, district: str, contact: str = "") -> MemberRecord:
    return MemberRecord(id=id_, values=("", district, f"Член Церкви {id_}", contact))


# ---------------------------------------------------------------------------
# District filter
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("district", ["ALL", "ВСІ", "all", None])
def test_all_returns_every_record(sample_records, district):
    assert filter_by_district(sample_records, district) == list(sample_records)


def test_filter_is_exact(sample_records):
    ids = [r.id for r in filter_by_district(sample_records, "ЦЕНТР")]
    assert ids == [3]


def test_filter_ignores_case_and_spaces():
    records = [_member(1, " центр "), _member(2, "КАСКАД")]
    assert [r.id for r in filter_by_district(records, "Центр")] == [1]


def test_filter_and_tally_disagree_on_substring_districts():
    # "ЦЕНТР 2" is not in the ЦЕНТР list, yet it is counted under ЦЕНТР
    records = [_member(1, "ЦЕНТР"), _member(2, "ЦЕНТР 2")]
    assert [r.id for r in filter_by_district(records, "ЦЕНТР")] == [1]
    assert aggregate_by_district(records)["ЦЕНТР"] == 2


def test_filter_returns_new_list(sample_records):
    result = filter_by_district(sample_records, "ALL")
    result.clear()
    assert len(sample_records) == 6


# ---------------------------------------------------------------------------
# Tallies
# ---------------------------------------------------------------------------

def test_aggregate_status(sample_records, boundary):
    counts = aggregate_status(sample_records, boundary)
    assert counts == {
        ContactStatus.FRESH: 2,
        ContactStatus.STALE: 1,
        ContactStatus.MISSING: 3,
    }


def test_aggregate_status_empty_has_all_keys(boundary):
    assert aggregate_status([], boundary) == {s: 0 for s in ContactStatus}


def test_aggregate_status_moves_with_boundary(sample_records):
    counts = aggregate_status(sample_records, GraceBoundary(2026, 1))
    assert counts[ContactStatus.FRESH] == 0
    assert counts[ContactStatus.STALE] == 2


def test_aggregate_by_district(sample_records):
    assert aggregate_by_district(sample_records) == {
        "АЕРОПОРТ": 1,
        "КАСКАД": 1,
        "ЦЕНТР": 2,
        "ОБ'ЇЗНА": 1,
    }


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("КАСКАД", "КАСКАД"),
        (" каскад ", "КАСКАД"),
        ("ЦЕНТР 2", "ЦЕНТР"),
        ("НЕВІДОМО", None),
        ("", None),
    ],
)
def test_match_district(cell, expected):
    assert match_district(cell) == expected


def test_status_summary_percentages(sample_records, boundary):
    summary = {s["status"]: s for s in status_summary(sample_records, boundary)}
    assert summary["FRESH"]["count"] == 2
    assert summary["MISSING"]["pct"] == 50.0
    assert summary["STALE"]["color"] == "FFF9C4"


def test_records_frame(sample_records, boundary):
    df = records_frame(sample_records, boundary)
    assert list(df["id"]) == [1, 2, 3, 4, 8, 9]
    assert df.loc[df["id"] == 4, "district"].item() == "ЦЕНТР"
    assert df["district"].dtype == object
    assert pd.isna(df.loc[df["id"] == 9, "district"].item())
    assert df.loc[df["id"] == 2, "last_contact"].item() == dt.date(2025, 11, 5)


def test_district_status_table(sample_records, boundary):
    table = {row["district"]: row for row in district_status_table(sample_records, boundary)}
    assert list(table) == ["АЕРОПОРТ", "КАСКАД", "ЦЕНТР", "ОБ'ЇЗНА"]
    assert table["ЦЕНТР"] == {
        "district": "ЦЕНТР", "total": 2, "fresh": 1, "stale": 0, "missing": 1, "fresh_pct": 50.0,
    }
    assert table["КАСКАД"]["stale"] == 1


def test_district_status_table_empty(boundary):
    rows = district_status_table([], boundary)
    assert [r["total"] for r in rows] == [0, 0, 0, 0]


# ---------------------------------------------------------------------------
# Display projections
# ---------------------------------------------------------------------------

def test_presbyter_label():
    assert presbyter_label("ALL") == "Районні пресвітери"
    assert presbyter_label("ЦЕНТР") == "Припхан Василь Степанович"


def test_roster_rows(sample_records, boundary):
    rows = roster_rows(sample_records, boundary)
    first = rows[0]
    assert first["number"] == 1
    assert first["id"] == 1
    assert first["status"] == "FRESH"
    assert first["color"] == "CCFFCC"
    assert first["tokens"] == [{"text": "05.12.2025", "emphasis": True}]

    cells = {c["column"]: c for c in first["cells"]}
    assert 0 not in cells and 1 not in cells and 11 not in cells
    assert cells[2]["label"] == "ПІБ"
    assert cells[3]["value"] == "05.12.2025"
    assert cells[4]["value"].endswith("...")
    assert cells[4]["title"] == "Хворіє, потребує відвідування лікарні"
    assert cells[7]["value"] == "Хор та..."
    assert cells[5]["value"] == "-"


def test_roster_row_contact_history(sample_records, boundary):
    row = roster_rows(sample_records, boundary)[1]
    assert row["status"] == "STALE"
    assert row["tokens"] == [
        {"text": "01.10.2025", "emphasis": False},
        {"text": "05.11.2025", "emphasis": True},
    ]
    assert row["tooltip"] == "01.10.2025 / 05.11.2025"


def test_member_card(sample_records, boundary):
    card = member_card(sample_records[0], boundary)
    assert card["id"] == 1
    assert card["full_name"] == "Іваненко Петро Олексійович"
    assert card["phone"] == "+380 50 123 4567"
    assert card["address"] == "вул. Коновальця, 12"
    assert card["last_contact"] == "05.12.2025"
    assert card["last_contact_date"] == dt.date(2025, 12, 5)
    assert card["years_in_church"] == ""
    assert card["status"] == "FRESH"


def test_district_status_table_custom_districts(boundary):
    records = [_member(1, "ПІВНІЧ", "05.12.2025"), _member(2, "ПІВДЕНЬ 3")]
    rows = district_status_table(records, boundary, districts=["ПІВНІЧ", "ПІВДЕНЬ"])
    assert rows == [
        {"district": "ПІВНІЧ", "total": 1, "fresh": 1, "stale": 0, "missing": 0, "fresh_pct": 100.0},
        {"district": "ПІВДЕНЬ", "total": 1, "fresh": 0, "stale": 0, "missing": 1, "fresh_pct": 0.0},
    ]


def test_records_frame_custom_districts(boundary):
    df = records_frame([_member(1, "ПІВНІЧ")], boundary, districts=["ПІВНІЧ"])
    assert df["district"].tolist() == ["ПІВНІЧ"]


def test_roster_row_keeps_text_around_invalid_dates(boundary):
    record = MemberRecord(id=1, values=("", "ЦЕНТР", "Петренко Іван", "<i>дзвінок 99.99.2025 без відповіді</i>"))
    row = roster_rows([record], boundary)[0]
    contact = next(c for c in row["cells"] if c["column"] == 3)
    assert row["status"] == "MISSING"
    assert contact["value"] == "дзвінок 99.99.2025 без відповіді"
    assert contact["title"] == "дзвінок 99.99.2025 без відповіді"


def test_member_card_follows_layout_columns(boundary):
    layout = SheetLayout(district_col=5, name_col=6, contact_col=7)
    values = ("", "WRONG", "Не Той Член", "01.01.2020", "", "ЦЕНТР", "Петренко Іван", "05.12.2025")
    record = MemberRecord(id=1, values=values)

    assert filter_by_district([record], "ЦЕНТР", layout) == [record]
    card = member_card(record, boundary, layout)
    assert card["district"] == "ЦЕНТР"
    assert card["full_name"] == "Петренко Іван"
    assert card["last_contact"] == "05.12.2025"
    assert card["status"] == "FRESH"
