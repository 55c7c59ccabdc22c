"""
Single source of truth for all Excel colors, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from flock.config import STATUS_COLORS

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
NAVY = "244155"
CARD_BLUE = "2E5591"
TABLE_GREEN = "B2CFB6"
HEADER_BG = "A4C2A8"
BLACK = "000000"
GRAY_666 = "666666"
TOTAL_ROW_BG = "E3F2FD"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=16, bold=True, color=NAVY)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
HEADER_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
NAME_FONT = Font(name="Calibri", size=10, bold=True, color="0C2D48")
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=CARD_BLUE)
KPI_VALUE_FONT = Font(name="Calibri", size=24, bold=True, color=CARD_BLUE)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=GRAY_666)
LEGEND_BOLD_FONT = Font(name="Calibri", size=10, bold=True)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")
ROW_FILL = PatternFill(start_color=TABLE_GREEN, end_color=TABLE_GREEN, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_ROW_BG, end_color=TOTAL_ROW_BG, fill_type="solid")

STATUS_FILLS = {
    status: PatternFill(start_color=color, end_color=color, fill_type="solid")
    for status, color in STATUS_COLORS.items()
}

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color=BLACK),
    right=Side(style="thin", color=BLACK),
    top=Side(style="thin", color=BLACK),
    bottom=Side(style="thin", color=BLACK),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=BLACK),
    right=Side(style="thin", color=BLACK),
    top=Side(style="thin", color=BLACK),
    bottom=Side(style="medium", color=BLACK),
)
TOTAL_BORDER = Border(
    left=Side(style="thin", color="999999"),
    right=Side(style="thin", color="999999"),
    top=Side(style="medium", color="999999"),
    bottom=Side(style="medium", color="999999"),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
WRAP = Alignment(horizontal="left", vertical="center", wrap_text=True)
WRAP_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
