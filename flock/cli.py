#!/usr/bin/env python3
"""
Flock CLI — Unified entry point for roster listing, statistics, Excel export, and API server.

USAGE:
  python -m flock.cli roster                                # Whole roster from the published sheet
  python -m flock.cli roster --district ЦЕНТР               # One district (exact match)
  python -m flock.cli roster --csv export.csv               # Read a saved CSV instead of fetching

  python -m flock.cli stats                                 # Status + district statistics
  python -m flock.cli stats --boundary 2026-03              # Different grace boundary

  python -m flock.cli export                                # Roster workbook to the export folder
  python -m flock.cli export --district КАСКАД --output roster.xlsx

  python -m flock.cli serve                                 # Start API server
  python -m flock.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path

from flock.config import EXPORT_FOLDER, CHURCH_TITLE
from flock.data.errors import IngestError
from flock.data.store import RosterStore
from flock.data.schemas import DEFAULT_BOUNDARY, GraceBoundary


def _build_store(args) -> RosterStore:
    """Create a store and load it from --csv or the published sheet."""
    boundary = GraceBoundary.parse(args.boundary) if getattr(args, "boundary", None) else DEFAULT_BOUNDARY
    store = RosterStore(boundary=boundary)
    csv_path = getattr(args, "csv", None)
    if csv_path:
        store.load_file(Path(csv_path))
    else:
        store.load()
    return store


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def cmd_roster(args):
    """Print the roster table for a district."""
    from flock.analytics.views import filter_by_district, roster_rows, presbyter_label

    _banner(CHURCH_TITLE)
    store = _build_store(args)
    records = filter_by_district(store.records, args.district, store.layout)
    rows = roster_rows(records, store.boundary, store.layout)

    print(f"\n  Район: {args.district or 'ВСІ'}  |  Пресвітер: {presbyter_label(args.district)}"
          f"  |  Членів: {len(rows)}\n")
    for r in rows:
        contact = " / ".join(t["text"] for t in r["tokens"]) or "-"
        print(f"{r['number']:<5}{r['name'][:38]:<40}{r['district'][:12]:<14}{r['status']:<9}{contact}")
    print()


def cmd_stats(args):
    """Print status and district statistics."""
    from flock.analytics.views import status_summary, aggregate_by_district, district_status_table

    _banner("FLOCK — СТАТИСТИКА КОНТАКТІВ")
    store = _build_store(args)
    records = store.records

    print(f"\n  Grace boundary: {store.boundary.label}  |  Members: {len(records)}\n")
    for s in status_summary(records, store.boundary, store.layout):
        print(f"  {s['status']:<9}{s['count']:>6}  {s['pct']:>5.1f}%")

    print("\n  By district (loose match):")
    for district, count in aggregate_by_district(records, store.layout).items():
        print(f"  {district:<14}{count:>6}")

    print(f"\n  {'District':<14}{'Total':>7}{'Fresh':>7}{'Stale':>7}{'Missing':>9}")
    for row in district_status_table(records, store.boundary, store.layout):
        print(f"  {row['district']:<14}{row['total']:>7}{row['fresh']:>7}{row['stale']:>7}{row['missing']:>9}")
    print()


def cmd_export(args):
    """Write the roster workbook."""
    from flock.reports.roster_report import generate_excel

    _banner("FLOCK — ROSTER EXPORT")
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")
    store = _build_store(args)

    if args.output:
        out = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        out = EXPORT_FOLDER / f"Roster_{args.district or 'ALL'}_{timestamp}.xlsx"

    path = generate_excel(store, out, args.district)
    print(f"\n  Roster saved to: {path}")
    print("=" * 70 + "\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Flock API on port {args.port}...")
    uvicorn.run("flock.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--csv", help="Read a saved CSV export instead of fetching the sheet")
    p.add_argument("--boundary", help="Grace boundary YYYY-MM (default from FLOCK_GRACE_BOUNDARY)")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Flock — church member roster and pastoral contact tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    roster_parser = subparsers.add_parser("roster", help="Print the member roster")
    roster_parser.add_argument("--district", help="District (exact match); omit for all")
    _add_source_args(roster_parser)
    roster_parser.set_defaults(func=cmd_roster)

    stats_parser = subparsers.add_parser("stats", help="Print contact statistics")
    _add_source_args(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    export_parser = subparsers.add_parser("export", help="Export the roster to Excel")
    export_parser.add_argument("--district", help="District (exact match); omit for all")
    export_parser.add_argument("--output", help="Output .xlsx path")
    _add_source_args(export_parser)
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (IngestError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
