"""
Download the roster CSV from the published spreadsheet export.
"""
from __future__ import annotations

import time

import requests

from flock.config import SHEET_ID, SHEET_NAME, CSV_URL, FETCH_TIMEOUT
from flock.data.errors import FetchError

_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq"


def build_sheet_url(sheet_id: str = SHEET_ID) -> str:
    """Base gviz export URL for a spreadsheet (query params added at fetch time)."""
    return _EXPORT_URL.format(sheet_id=sheet_id)


def sheet_params(sheet_name: str = SHEET_NAME, cachebust: int | None = None) -> dict:
    """Query params for a CSV export of one sheet, with a cache-busting stamp."""
    if cachebust is None:
        cachebust = int(time.time() * 1000)
    return {"tqx": "out:csv", "sheet": sheet_name, "cachebust": cachebust}


def fetch_csv_text(
    url: str | None = None,
    sheet_name: str = SHEET_NAME,
    timeout: float = FETCH_TIMEOUT,
) -> str:
    """GET the roster CSV and return its body as text.

    Raises FetchError when the request fails, the server answers with an error
    status, or the body is not CSV text (e.g. a sign-in page for a sheet that is
    not published).
    """
    if url is None:
        url = CSV_URL or build_sheet_url()
        params = None if CSV_URL else sheet_params(sheet_name)
    else:
        params = None

    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        status = getattr(getattr(e, "response", None), "status_code", None)
        raise FetchError(f"Could not fetch roster CSV: {e}", url=url, status_code=status) from e

    content_type = response.headers.get("Content-Type", "").lower()
    if content_type and (not content_type.startswith("text/") or content_type.startswith("text/html")):
        raise FetchError(
            f"Roster source returned {content_type!r}, expected CSV text",
            url=url, status_code=response.status_code,
        )

    try:
        return response.content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FetchError(f"Roster CSV is not valid UTF-8: {e}", url=url,
                         status_code=response.status_code) from e
