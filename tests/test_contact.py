import datetime as dt

import pytest

from flock.data.contact import (
    classify_contact,
    find_date_tokens,
    parse_date_token,
    status_for_date,
)
from flock.data.schemas import ContactStatus, GraceBoundary


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("візит 05.10.2025 тест", ContactStatus.MISSING),
        ("05.11.2025", ContactStatus.STALE),
        ("05.12.2025", ContactStatus.FRESH),
        ("01.03.2026", ContactStatus.FRESH),
        ("30.11.25", ContactStatus.STALE),
        ("31.12.2024", ContactStatus.MISSING),
    ],
)
def test_status_against_boundary(cell, expected, boundary):
    assert classify_contact(cell, boundary).status == expected


def test_no_date_is_missing(boundary):
    result = classify_contact("no date here", boundary)
    assert result.status == ContactStatus.MISSING
    assert result.last_valid_date is None
    assert result.tokens == ()
    assert result.tooltip == "no date here"


def test_empty_cell_tooltip(boundary):
    result = classify_contact("", boundary)
    assert result.status == ContactStatus.MISSING
    assert result.tooltip == "Немає даних"


def test_later_token_wins(boundary):
    result = classify_contact("01.01.2024 / 15.12.2025", boundary)
    assert result.last_valid_date == dt.date(2025, 12, 15)
    assert result.status == ContactStatus.FRESH
    assert result.tokens == ("01.01.2024", "15.12.2025")
    assert result.tooltip == "01.01.2024 / 15.12.2025"


def test_order_of_appearance_beats_chronology(boundary):
    # The last written date decides even when an earlier one is more recent
    result = classify_contact("15.12.2025, потім 01.01.2024", boundary)
    assert result.last_valid_date == dt.date(2024, 1, 1)
    assert result.status == ContactStatus.MISSING


def test_malformed_token_keeps_raw_text(boundary):
    result = classify_contact("99.99.2025", boundary)
    assert result.status == ContactStatus.MISSING
    assert result.last_valid_date is None
    assert result.tokens == ("99.99.2025",)
    assert result.raw_text == "99.99.2025"
    assert result.tooltip == "99.99.2025"


def test_malformed_last_token_falls_back_to_earlier_valid(boundary):
    result = classify_contact("05.12.2025 / 31.02.2026", boundary)
    assert result.last_valid_date == dt.date(2025, 12, 5)
    assert result.status == ContactStatus.FRESH
    assert result.tokens == ("05.12.2025", "31.02.2026")


def test_markup_is_stripped_before_matching(boundary):
    result = classify_contact("<b>05.12.2025</b>", boundary)
    assert result.status == ContactStatus.FRESH
    assert result.raw_text == "05.12.2025"


def test_classification_is_deterministic(boundary):
    cell = "візит 05.11.2025"
    assert classify_contact(cell, boundary) == classify_contact(cell, boundary)


def test_reference_date_is_accepted_as_boundary():
    result = classify_contact("05.11.2025", dt.date(2025, 12, 20))
    assert result.status == ContactStatus.STALE


def test_january_boundary_rolls_back_a_year():
    jan = GraceBoundary(2026, 1)
    assert classify_contact("10.12.2025", jan).status == ContactStatus.STALE
    assert classify_contact("10.11.2025", jan).status == ContactStatus.MISSING
    assert classify_contact("10.01.2026", jan).status == ContactStatus.FRESH


def test_find_date_tokens_in_order():
    text = "05.10.2025 тест 1.2.24; 12.12.2025"
    assert find_date_tokens(text) == ["05.10.2025", "1.2.24", "12.12.2025"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("05.12.2025", (5, 12, 2025)),
        ("5.1.25", (5, 1, 2025)),
        ("29.02.2024", (29, 2, 2024)),
    ],
)
def test_parse_date_token(raw, expected):
    token = parse_date_token(raw)
    assert (token.day, token.month, token.year) == expected


@pytest.mark.parametrize("raw", ["99.99.2025", "29.02.2025", "00.10.2025", "12.2025", ""])
def test_parse_date_token_rejects(raw):
    assert parse_date_token(raw) is None


def test_status_for_missing_date(boundary):
    assert status_for_date(None, boundary) == ContactStatus.MISSING


def test_status_colors():
    assert ContactStatus.FRESH.color == "CCFFCC"
    assert ContactStatus.STALE.color == "FFF9C4"
    assert ContactStatus.MISSING.color == "FFCCCC"
