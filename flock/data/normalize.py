"""
Cell text cleanup and display shortening.
"""
from __future__ import annotations

import re

from flock.config import NOTES_PREVIEW_CHARS, SERVICE_PREVIEW_WORDS, EMPTY_CELL

_MARKUP_RE = re.compile(r"<[^>]*>?")


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

def strip_markup(text: str | None) -> str:
    """Remove <...> markup (including a dangling "<..." tail) and trim."""
    return _MARKUP_RE.sub("", text or "").strip()


# ---------------------------------------------------------------------------
# Display previews
# ---------------------------------------------------------------------------

def preview_notes(text: str, limit: int = NOTES_PREVIEW_CHARS) -> str:
    """First ``limit`` characters of a notes cell, with an ellipsis when cut."""
    cleaned = strip_markup(text)
    if len(cleaned) > limit:
        return cleaned[:limit] + "..."
    return cleaned or EMPTY_CELL


def preview_words(text: str, limit: int = SERVICE_PREVIEW_WORDS) -> str:
    """First ``limit`` words of a cell, with an ellipsis when cut."""
    cleaned = strip_markup(text)
    words = cleaned.split()
    if len(words) > limit:
        return " ".join(words[:limit]) + "..."
    return cleaned or EMPTY_CELL


def display_value(text: str) -> str:
    return strip_markup(text) or EMPTY_CELL
