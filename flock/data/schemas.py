"""
Roster data model: member records, sheet layout, contact status, grace boundary.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from flock.config import (
    DISTRICT_COLUMN, NAME_COLUMN, CONTACT_COLUMN,
    MIN_NAME_LENGTH, MIN_COLUMNS,
    HEADER_NAME_LABEL, HEADER_PHOTO_MARKER,
    MEMBER_FIELDS, STATUS_COLORS, GRACE_BOUNDARY,
)


class ContactStatus(str, Enum):
    FRESH = "FRESH"
    STALE = "STALE"
    MISSING = "MISSING"

    @property
    def color(self) -> str:
        """Traffic-light fill colour (hex RGB) used by the table and Excel export."""
        return STATUS_COLORS[self.value]


@dataclass(frozen=True)
class SheetLayout:
    """Where things live in the roster sheet, plus the row-filter thresholds."""
    district_col: int = DISTRICT_COLUMN
    name_col: int = NAME_COLUMN
    contact_col: int = CONTACT_COLUMN
    min_name_length: int = MIN_NAME_LENGTH
    min_columns: int = MIN_COLUMNS
    header_name_label: str = HEADER_NAME_LABEL
    photo_marker: str = HEADER_PHOTO_MARKER
    fields: dict[str, int] = field(default_factory=lambda: dict(MEMBER_FIELDS), hash=False)

    def __post_init__(self) -> None:
        # Core columns always follow this layout's own indices
        fields = dict(self.fields)
        fields.update(
            district=self.district_col,
            full_name=self.name_col,
            last_contact=self.contact_col,
        )
        object.__setattr__(self, "fields", fields)

    @property
    def required_columns(self) -> int:
        """Column count a header row must have for the core columns to exist."""
        return max(self.district_col, self.name_col, self.contact_col) + 1


DEFAULT_LAYOUT = SheetLayout()


@dataclass(frozen=True)
class MemberRecord:
    """One roster row. ``id`` is the 0-based source row index."""
    id: int
    values: tuple[str, ...]

    def cell(self, index: int) -> str:
        """Raw value at a column position, "" when the row is shorter."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return ""

    def get(self, name: str, layout: SheetLayout = DEFAULT_LAYOUT) -> str:
        """Value of a named field from the declared schema."""
        return self.cell(layout.fields[name])

    def name(self, layout: SheetLayout = DEFAULT_LAYOUT) -> str:
        return self.cell(layout.name_col)

    def district(self, layout: SheetLayout = DEFAULT_LAYOUT) -> str:
        return self.cell(layout.district_col)

    def contact_cell(self, layout: SheetLayout = DEFAULT_LAYOUT) -> str:
        return self.cell(layout.contact_col)


@dataclass(frozen=True)
class DateToken:
    """A (day, month, year) triple found in a contact cell. Month is 1-12."""
    day: int
    month: int
    year: int
    raw: str = ""

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)


@dataclass(frozen=True, order=True)
class GraceBoundary:
    """First month (inclusive) of the current contact grace period."""
    year: int
    month: int  # 1-12

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid boundary month: {self.month}")

    @classmethod
    def parse(cls, value: str) -> "GraceBoundary":
        """Parse "YYYY-MM"."""
        try:
            year, month = value.strip().split("-")[:2]
            return cls(int(year), int(month))
        except (AttributeError, ValueError):
            raise ValueError(f"Invalid grace boundary {value!r}, expected YYYY-MM")

    @classmethod
    def from_date(cls, day: dt.date) -> "GraceBoundary":
        return cls(day.year, day.month)

    def previous(self) -> "GraceBoundary":
        """The single month immediately before this boundary."""
        if self.month == 1:
            return GraceBoundary(self.year - 1, 12)
        return GraceBoundary(self.year, self.month - 1)

    def contains(self, day: dt.date) -> bool:
        """True when the date falls in this calendar month."""
        return day.year == self.year and day.month == self.month

    @property
    def label(self) -> str:
        return f"{self.year}-{self.month:02d}"


DEFAULT_BOUNDARY = GraceBoundary.parse(GRACE_BOUNDARY)


@dataclass(frozen=True)
class ContactResult:
    """Classification of one contact-history cell."""
    status: ContactStatus
    last_valid_date: Optional[dt.date] = None
    tokens: tuple[str, ...] = ()
    raw_text: str = ""
    tooltip: str = ""

    @property
    def color(self) -> str:
        return self.status.color

    @property
    def display_tokens(self) -> list[dict]:
        """Tokens for display; the last one is emphasised."""
        last = len(self.tokens) - 1
        return [{"text": t, "emphasis": i == last} for i, t in enumerate(self.tokens)]


@dataclass(frozen=True)
class RosterSnapshot:
    """Result of one ingestion pass. Replaced wholesale, never mutated."""
    headers: tuple[str, ...] = ()
    records: tuple[MemberRecord, ...] = ()
    loaded_at: Optional[dt.datetime] = None
    source: str = ""
    row_count: int = 0  # tokenized rows, header included

    @property
    def member_count(self) -> int:
        return len(self.records)
