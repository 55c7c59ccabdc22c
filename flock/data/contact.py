"""
Contact-date extraction and traffic-light classification.

A contact cell holds a free-text history such as "візит 05.10.2025 / 15.12.2025".
The last valid date in order of appearance decides the status, compared with an
explicit grace boundary so the result never depends on the current clock.
"""
from __future__ import annotations

import datetime as dt
import re

from flock.config import NO_DATA_TOOLTIP
from flock.data.normalize import strip_markup
from flock.data.schemas import ContactResult, ContactStatus, DateToken, GraceBoundary

_DATE_TOKEN_RE = re.compile(r"\d{1,2}\.\d{1,2}\.\d{2,4}")
_NON_DATE_CHARS_RE = re.compile(r"[^\d.]")


# ---------------------------------------------------------------------------
# Extraction & parsing
# ---------------------------------------------------------------------------

def find_date_tokens(text: str) -> list[str]:
    """All date-like substrings (d.m.y) in order of appearance."""
    return _DATE_TOKEN_RE.findall(text or "")


def parse_date_token(raw: str) -> DateToken | None:
    """Parse "d.m.y" into a DateToken, or None when it is not a real date.

    Years written with fewer than three digits are taken as 20xx.
    """
    parts = _NON_DATE_CHARS_RE.sub("", (raw or "").strip()).split(".")
    if len(parts) < 3:
        return None
    try:
        day, month = int(parts[0]), int(parts[1])
        year = int(parts[2])
    except ValueError:
        return None
    if len(parts[2]) < 3:
        year += 2000

    token = DateToken(day=day, month=month, year=year, raw=raw)
    try:
        token.to_date()
    except ValueError:
        return None
    return token


def last_valid_date(tokens: list[str]) -> dt.date | None:
    """Date of the last token that parses, by position rather than by value."""
    for raw in reversed(tokens):
        parsed = parse_date_token(raw)
        if parsed is not None:
            return parsed.to_date()
    return None


# ---------------------------------------------------------------------------
# Status policy
# ---------------------------------------------------------------------------

def status_for_date(day: dt.date | None, boundary: GraceBoundary) -> ContactStatus:
    """FRESH at/after the boundary month, STALE in the month before, else MISSING."""
    if day is None:
        return ContactStatus.MISSING
    if (day.year, day.month) >= (boundary.year, boundary.month):
        return ContactStatus.FRESH
    if boundary.previous().contains(day):
        return ContactStatus.STALE
    return ContactStatus.MISSING


def _as_boundary(boundary: GraceBoundary | dt.date) -> GraceBoundary:
    if isinstance(boundary, GraceBoundary):
        return boundary
    return GraceBoundary.from_date(boundary)


def classify_contact(cell_text: str, boundary: GraceBoundary | dt.date) -> ContactResult:
    """Classify one contact-history cell against the grace boundary.

    ``boundary`` may also be a reference date, in which case its month is the
    boundary.
    """
    boundary = _as_boundary(boundary)
    raw_text = strip_markup(cell_text)
    tokens = find_date_tokens(raw_text)

    if not tokens:
        return ContactResult(
            status=ContactStatus.MISSING,
            raw_text=raw_text,
            tooltip=raw_text or NO_DATA_TOOLTIP,
        )

    last = last_valid_date(tokens)
    if last is None:
        # Date-like text that is not a date: keep it visible, flag as missing
        return ContactResult(
            status=ContactStatus.MISSING,
            tokens=tuple(tokens),
            raw_text=raw_text,
            tooltip=raw_text,
        )

    return ContactResult(
        status=status_for_date(last, boundary),
        last_valid_date=last,
        tokens=tuple(tokens),
        raw_text=raw_text,
        tooltip=" / ".join(tokens),
    )
