"""
CSV tokenizer for published spreadsheet exports.

Quoted fields may contain commas, line breaks and doubled quotes. Fields are
trimmed; rows of irregular width are passed through as-is.
"""
from __future__ import annotations


def tokenize(text: str) -> list[list[str]]:
    """Split CSV text into rows of trimmed string fields."""
    rows: list[list[str]] = []
    row: list[str] = []
    buf: list[str] = []
    in_quotes = False

    i = 0
    n = len(text or "")
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == '"' and in_quotes and nxt == '"':
            buf.append('"')
            i += 1
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            row.append("".join(buf).strip())
            buf = []
        elif ch in "\r\n" and not in_quotes:
            if buf or row:
                row.append("".join(buf).strip())
                rows.append(row)
                row, buf = [], []
            if ch == "\r" and nxt == "\n":
                i += 1
        else:
            buf.append(ch)
        i += 1

    # Unterminated quotes land here too: the tail becomes the last field
    if buf or row:
        row.append("".join(buf).strip())
        rows.append(row)

    return rows


def to_csv_row(fields: list[str]) -> str:
    """Serialize one row, quoting fields that need it."""
    out = []
    for f in fields:
        if any(c in f for c in ',"\r\n'):
            out.append('"' + f.replace('"', '""') + '"')
        else:
            out.append(f)
    return ",".join(out)
