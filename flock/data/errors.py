"""
Ingestion failures surfaced to callers.

Parsing anomalies (malformed dates, short rows) never reach this module: they
are recovered inside the pipeline. Only problems that make a whole ingestion
unusable are raised, and the store keeps its previous snapshot when they are.
"""
from __future__ import annotations


class IngestError(Exception):
    """Base class for a failed ingestion pass."""


class FetchError(IngestError):
    """The CSV source is unreachable or did not return CSV text."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class SchemaError(IngestError, ValueError):
    """The sheet has fewer columns than the configured layout needs."""
