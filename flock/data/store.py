"""
RosterStore — holds the current roster snapshot for one session.

Each successful ingestion builds a brand-new snapshot and swaps it in with a
single assignment; a failed one leaves the previous snapshot untouched. The
caller is expected to run one ingestion at a time.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Callable, Optional

from flock.data.errors import IngestError
from flock.data.fetch import fetch_csv_text
from flock.data.loader import load_csv_file, parse_roster
from flock.data.schemas import (
    DEFAULT_BOUNDARY, DEFAULT_LAYOUT,
    GraceBoundary, MemberRecord, RosterSnapshot, SheetLayout,
)


class RosterStore:
    """In-memory member roster with district/status accessors."""

    def __init__(
        self,
        layout: SheetLayout = DEFAULT_LAYOUT,
        boundary: GraceBoundary = DEFAULT_BOUNDARY,
        fetcher: Callable[[], str] = fetch_csv_text,
    ) -> None:
        self.layout = layout
        self.boundary = boundary
        self.fetcher = fetcher
        self.snapshot = RosterSnapshot()
        self.last_error: Optional[str] = None
        self.last_error_at: Optional[dt.datetime] = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _replace(self, snapshot: RosterSnapshot) -> RosterSnapshot:
        self.snapshot = snapshot
        self.last_error = None
        self.last_error_at = None
        self._loaded = True
        print(f"  Roster: {snapshot.member_count:,} members from {snapshot.row_count:,} rows ({snapshot.source})")
        return snapshot

    def _fail(self, exc: IngestError) -> None:
        self.last_error = str(exc)
        self.last_error_at = dt.datetime.now()
        print(f"  Warning: roster ingestion failed, keeping previous data: {exc}")

    def ingest_text(self, text: str, source: str = "text") -> RosterSnapshot:
        """Parse CSV text and swap it in. Raises IngestError on schema failure."""
        try:
            snapshot = parse_roster(text, source=source, layout=self.layout)
        except IngestError as e:
            self._fail(e)
            raise
        return self._replace(snapshot)

    def load(self) -> "RosterStore":
        """Fetch the published sheet and swap in the new roster.

        Raises FetchError/SchemaError; the previous roster stays in place.
        """
        print("Loading roster...")
        try:
            text = self.fetcher()
        except IngestError as e:
            self._fail(e)
            raise
        self.ingest_text(text, source="sheet")
        return self

    def load_file(self, filepath: Path) -> "RosterStore":
        """Load a CSV export from disk instead of fetching."""
        print(f"Loading roster from {filepath}...")
        try:
            snapshot = load_csv_file(filepath, layout=self.layout)
        except IngestError as e:
            self._fail(e)
            raise
        self._replace(snapshot)
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[MemberRecord, ...]:
        return self.snapshot.records

    @property
    def headers(self) -> tuple[str, ...]:
        return self.snapshot.headers

    def get_member(self, member_id: int) -> MemberRecord | None:
        """Record by its source row index."""
        return next((r for r in self.snapshot.records if r.id == member_id), None)

    def member_count(self) -> int:
        return self.snapshot.member_count

    def health(self) -> dict:
        snap = self.snapshot
        return {
            "loaded": self._loaded,
            "members": snap.member_count,
            "rows": snap.row_count,
            "source": snap.source,
            "loaded_at": snap.loaded_at.isoformat() if snap.loaded_at else None,
            "boundary": self.boundary.label,
            "last_error": self.last_error,
            "last_error_at": self.last_error_at.isoformat() if self.last_error_at else None,
        }
