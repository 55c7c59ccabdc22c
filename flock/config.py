"""
Flock — Configuration: sheet source, column layout, thresholds, labels.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Source spreadsheet, override with FLOCK_* env vars for deployment
# ---------------------------------------------------------------------------
SHEET_ID = os.environ.get("FLOCK_SHEET_ID", "1s_Wio5niYvq2HRoBYwH3bS9NEcbtsJsWXv5P7u5Zhw8")
SHEET_NAME = os.environ.get("FLOCK_SHEET_NAME", "СПИСОК")
CSV_URL = os.environ.get("FLOCK_CSV_URL", "")  # full URL override, skips sheet id/name
FETCH_TIMEOUT = float(os.environ.get("FLOCK_FETCH_TIMEOUT", "20"))

EXPORT_FOLDER = Path(os.environ.get("FLOCK_EXPORT_DIR", str(Path.home() / "Flock" / "exports")))

# ---------------------------------------------------------------------------
# Grace-period boundary ("YYYY-MM"): contact in this month or later is fresh,
# contact in the month before it is stale, anything older needs attention.
# ---------------------------------------------------------------------------
GRACE_BOUNDARY = os.environ.get("FLOCK_GRACE_BOUNDARY", "2025-12")

# ---------------------------------------------------------------------------
# Column layout of the roster sheet (0-based positions)
# ---------------------------------------------------------------------------
DISTRICT_COLUMN = int(os.environ.get("FLOCK_DISTRICT_COLUMN", "1"))
NAME_COLUMN = int(os.environ.get("FLOCK_NAME_COLUMN", "2"))
CONTACT_COLUMN = int(os.environ.get("FLOCK_CONTACT_COLUMN", "3"))

MIN_NAME_LENGTH = int(os.environ.get("FLOCK_MIN_NAME_LENGTH", "3"))
MIN_COLUMNS = int(os.environ.get("FLOCK_MIN_COLUMNS", "3"))

# Header artifacts found in the name column (compared lower-cased)
HEADER_NAME_LABEL = "піб"
HEADER_PHOTO_MARKER = "фото"

# Named fields of the personal card → column position
MEMBER_FIELDS = {
    "district": DISTRICT_COLUMN,
    "full_name": NAME_COLUMN,
    "last_contact": CONTACT_COLUMN,
    "notes": 4,
    "admin_actions": 5,
    "care": 6,
    "service": 7,
    "visitation": 8,
    "presence": 9,
    "age": 10,
    "address": 13,
    "phone": 14,
    "years_in_church": 22,
}

# ---------------------------------------------------------------------------
# Districts (closed set) and the "no filter" sentinel
# ---------------------------------------------------------------------------
DISTRICTS = [
    "АЕРОПОРТ",
    "КАСКАД",
    "ЦЕНТР",
    "ОБ'ЇЗНА",
]
ALL_DISTRICTS = "ALL"
ALL_DISTRICTS_LABEL = "ВСІ"

PRESBYTER_NAME = os.environ.get("FLOCK_PRESBYTER", "Припхан Василь Степанович")
ALL_PRESBYTERS_LABEL = "Районні пресвітери"

# ---------------------------------------------------------------------------
# Roster table: column labels and columns hidden from the table view
# ---------------------------------------------------------------------------
TABLE_LABELS = [
    "ПІБ", "Дати\nконтактів", "ПРИМІТКИ", "Дії_(для_адміністратора)", "Опіка",
    "Служіння", "Відвідування", "Присутність", "Вік", "Стать",
    "Адрес", "Телефон", "Дата народж.", "Ос-та", "Хр. С.Д.",
    "Сім. Стан", "Соц. Стан", "В.Х.", "В_церкві_з", "К-ть років в церкві",
]
HIDDEN_COLUMNS = {0, 1, 11}

NOTES_PREVIEW_CHARS = 25
SERVICE_PREVIEW_WORDS = 2
EMPTY_CELL = "-"
NO_DATA_TOOLTIP = "Немає даних"

# ---------------------------------------------------------------------------
# Contact status colours (traffic light) and legend
# ---------------------------------------------------------------------------
STATUS_COLORS = {
    "FRESH": "CCFFCC",
    "STALE": "FFF9C4",
    "MISSING": "FFCCCC",
}

STATUS_LEGEND = [
    ("FRESH", "Contact with the presbyter in the current grace period"),
    ("STALE", "Last contact exactly one month before the grace period"),
    ("MISSING", "No valid contact date, or the last contact is older than that"),
]

CHURCH_TITLE = "УКРАЇНСЬКА ЦЕРКВА ХРИСТИЯН ВІРИ ЄВАНГЕЛЬСЬКОЇ М. ІВАНО-ФРАНКІВСЬКА"
