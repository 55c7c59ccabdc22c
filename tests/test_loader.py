import datetime as dt

import pytest

from flock.data.errors import FetchError, SchemaError
from flock.data.loader import build_records, is_header_row, load_csv_file, parse_roster, validate_header
from flock.data.schemas import SheetLayout

from conftest import SAMPLE_MEMBER_IDS


def _row(name: str, district: str = "ЦЕНТР", contact: str = "05.12.2025") -> list[str]:
    return ["1", district, name, contact]


def test_sample_sheet_members(sample_records):
    assert [r.id for r in sample_records] == SAMPLE_MEMBER_IDS


def test_first_row_is_always_header():
    rows = [_row("Справжнє Ім'я Людини"), _row("Інше Ім'я Людини")]
    records = build_records(rows)
    assert [r.id for r in records] == [1]


@pytest.mark.parametrize("name", ["ПІБ", "  піб ", "Фото", "фото члена", "", "   "])
def test_header_artifacts_skipped(name):
    rows = [_row("header"), _row(name)]
    assert build_records(rows) == []
    assert is_header_row(1, _row(name))


@pytest.mark.parametrize(
    "name, kept",
    [
        ("Ася", False),
        ("Іван", True),
        ("  Ася  ", False),
        ("Ян", False),
    ],
)
def test_name_length_boundary(name, kept):
    rows = [_row("header"), _row(name)]
    assert bool(build_records(rows)) is kept


def test_short_rows_dropped():
    rows = [_row("header"), ["1", "ЦЕНТР"], ["2"], _row("Петренко Іван")]
    assert [r.id for r in build_records(rows)] == [3]


def test_min_columns_is_configurable():
    layout = SheetLayout(min_columns=5)
    rows = [_row("header"), _row("Петренко Іван"), _row("Петренко Іван") + ["x"]]
    assert [r.id for r in build_records(rows, layout)] == [2]


def test_custom_name_column():
    layout = SheetLayout(name_col=0, district_col=1, contact_col=2)
    rows = [["ПІБ", "Район", "Дата"], ["Петренко Іван", "ЦЕНТР", ""]]
    records = build_records(rows, layout)
    assert records[0].name(layout) == "Петренко Іван"


def test_values_are_kept_verbatim(sample_records, sample_rows):
    first = sample_records[0]
    assert first.values == tuple(sample_rows[1])
    assert len(first.values) == len(sample_rows[1])


def test_records_do_not_follow_input_mutation():
    rows = [_row("header"), _row("Петренко Іван")]
    records = build_records(rows)
    rows[1][2] = "Змінено"
    rows.append(_row("Новий Член Церкви"))
    assert records[0].values[2] == "Петренко Іван"
    assert len(records) == 1


def test_parse_roster_snapshot(sample_csv):
    now = dt.datetime(2025, 12, 20, 10, 0)
    snap = parse_roster(sample_csv, source="test", now=now)
    assert snap.headers[2] == "ПІБ"
    assert snap.member_count == len(SAMPLE_MEMBER_IDS)
    assert snap.row_count == 10
    assert snap.loaded_at == now
    assert snap.source == "test"


def test_parse_roster_empty_input_is_valid():
    snap = parse_roster("")
    assert snap.records == ()
    assert snap.headers == ()


def test_narrow_header_raises_schema_error():
    with pytest.raises(SchemaError):
        parse_roster("Район,ПІБ\nЦЕНТР,Петренко Іван\n")


def test_validate_header_accepts_wide_enough():
    validate_header(["a", "b", "c", "d"])
    with pytest.raises(SchemaError):
        validate_header(["a", "b", "c"])


def test_load_csv_file(sample_csv_file):
    snap = load_csv_file(sample_csv_file)
    assert [r.id for r in snap.records] == SAMPLE_MEMBER_IDS
    assert snap.source == str(sample_csv_file)


def test_load_missing_file_raises_fetch_error(tmp_path):
    with pytest.raises(FetchError):
        load_csv_file(tmp_path / "missing.csv")


def test_layout_fields_follow_core_columns():
    layout = SheetLayout(district_col=5, name_col=0, contact_col=7)
    assert layout.fields["district"] == 5
    assert layout.fields["full_name"] == 0
    assert layout.fields["last_contact"] == 7
    assert layout.fields["phone"] == 14
    assert SheetLayout().fields["district"] == 1


def test_name_column_past_row_end_is_skipped():
    layout = SheetLayout(name_col=6)
    rows = [_row("header") + ["", "", "ПІБ"], _row("x"), _row("x") + ["", "", "Петренко Іван"]]
    assert is_header_row(1, rows[1], layout)
    assert [r.id for r in build_records(rows, layout)] == [2]
