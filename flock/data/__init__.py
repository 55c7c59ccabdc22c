"""Roster ingestion, classification, and in-memory store."""
from .tokenizer import tokenize
from .normalize import strip_markup
from .contact import classify_contact
from .loader import build_records, parse_roster
from .store import RosterStore
from .schemas import ContactStatus, GraceBoundary, MemberRecord, SheetLayout
from .errors import IngestError, FetchError, SchemaError
