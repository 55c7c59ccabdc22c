"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from flock.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, NAME_FONT, TOTAL_FONT,
    THIN_BORDER, TOTAL_BORDER,
    ROW_FILL, TOTAL_FILL, STATUS_FILLS,
    KPI_VALUE_FONT, KPI_LABEL_FONT,
    CENTER, LEFT, RIGHT, WRAP_CENTER,
)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    """Apply header styling to an entire row."""
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = WRAP_CENTER
        cell.border = HEADER_BORDER


# ---------------------------------------------------------------------------
# Data cell
# ---------------------------------------------------------------------------

def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
    is_total: bool = False,
    status: str | None = None,
) -> None:
    """Write and format a single data cell.

    col_type: text | name | number | percent | status
    status: FRESH/STALE/MISSING — paints the traffic-light fill.
    """
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = value
    cell.font = TOTAL_FONT if is_total else (NAME_FONT if col_type == "name" else DATA_FONT)
    cell.border = TOTAL_BORDER if is_total else THIN_BORDER

    if col_type in ("number", "percent"):
        cell.alignment = RIGHT
    elif col_type == "status":
        cell.alignment = CENTER
    else:
        cell.alignment = LEFT

    if col_type == "percent":
        cell.number_format = '0.0"%"'
    elif col_type == "number":
        cell.number_format = "#,##0"

    if status and status in STATUS_FILLS:
        cell.fill = STATUS_FILLS[status]
    elif is_total:
        cell.fill = TOTAL_FILL
    else:
        cell.fill = ROW_FILL


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def auto_column_width(ws: Worksheet, min_width: int = 8, max_width: int = 45) -> None:
    """Auto-fit column widths based on the longest line in each column."""
    for column in ws.columns:
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value is None:
                continue
            longest = max(len(line) for line in str(cell.value).split("\n"))
            max_length = max(max_length, longest)
        ws.column_dimensions[column_letter].width = min(max(max_length + 2, min_width), max_width)


# ---------------------------------------------------------------------------
# KPI card
# ---------------------------------------------------------------------------

def add_kpi_card(ws: Worksheet, row: int, col: int, value, label: str, format_type: str = "number") -> None:
    """Write a large KPI value + small label below it."""
    value_cell = ws.cell(row=row, column=col)
    label_cell = ws.cell(row=row + 1, column=col)

    value_cell.value = value
    value_cell.font = KPI_VALUE_FONT
    value_cell.alignment = CENTER
    if format_type == "percent":
        value_cell.number_format = '0.0"%"'
    elif format_type == "number":
        value_cell.number_format = "#,##0"

    label_cell.value = label
    label_cell.font = KPI_LABEL_FONT
    label_cell.alignment = CENTER
