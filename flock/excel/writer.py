"""
ExcelWriter — high-level helpers for building styled Excel workbooks.
"""
from __future__ import annotations

import io
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from flock.excel.styles import (
    TITLE_FONT, SUBTITLE_FONT, SECTION_FONT,
    LEGEND_BOLD_FONT, DATA_FONT,
    STATUS_FILLS, THIN_BORDER, WRAP,
)
from flock.excel.formatters import (
    format_header_row,
    format_data_cell,
    auto_column_width,
    add_kpi_card,
)


ColSpec = tuple[str, str, str]  # (key, col_type, label)


class ExcelWriter:
    """Fluent builder for styled Excel workbooks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        return ws

    # ------------------------------------------------------------------
    # Title block
    # ------------------------------------------------------------------

    def write_title(self, ws: Worksheet, title: str, subtitle: str, merge_cols: int = 8) -> int:
        """Write title + subtitle rows. Returns next available row."""
        ws.cell(row=1, column=1).value = title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=merge_cols)

        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=merge_cols)

        for col in range(1, merge_cols + 1):
            ws.column_dimensions[get_column_letter(col)].width = 16

        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        """Write a section header. Returns next row."""
        ws.cell(row=row, column=1).value = title
        ws.cell(row=row, column=1).font = SECTION_FONT
        return row + 2

    # ------------------------------------------------------------------
    # KPI cards
    # ------------------------------------------------------------------

    def write_kpi_row(
        self,
        ws: Worksheet,
        row: int,
        kpis: list[tuple],  # [(value, label, format_type), ...]
        start_col: int = 1,
        col_spacing: int = 2,
    ) -> int:
        """Write a row of KPI cards. Returns next row."""
        col = start_col
        for value, label, fmt in kpis:
            add_kpi_card(ws, row, col, value, label, fmt)
            col += col_spacing
        return row + 3

    # ------------------------------------------------------------------
    # Data tables
    # ------------------------------------------------------------------

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColSpec],
        rows: list[dict],
        status_key: str | None = None,
        freeze: bool = True,
        show_total: bool = False,
        total_label: str = "ВСЬОГО",
    ) -> int:
        """Write a full table with headers + data rows.

        Columns of type "status" are painted with the row's ``status_key``
        traffic-light colour.

        Returns the row number after the last data row.
        """
        for col_num, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = label
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        for row_data in rows:
            status = row_data.get(status_key) if status_key else None
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                val = row_data.get(key, "")
                if val is None:
                    val = ""
                format_data_cell(ws, row, col_num, val, col_type,
                                 status=status if col_type == "status" else None)
            row += 1

        if show_total and rows:
            format_data_cell(ws, row, 1, total_label, "text", is_total=True)
            for col_num, (key, col_type, _) in enumerate(columns[1:], 2):
                if col_type == "number":
                    val = sum(r.get(key) or 0 for r in rows)
                    format_data_cell(ws, row, col_num, val, col_type, is_total=True)
                else:
                    format_data_cell(ws, row, col_num, "", "text", is_total=True)
            row += 1

        auto_column_width(ws)
        if freeze:
            ws.freeze_panes = f"B{start_row + 1}"

        return row

    def write_legend(self, ws: Worksheet, start_row: int, items: list[tuple[str, str]]) -> int:
        """Write the status legend, each status on its own colour. Returns next row."""
        ws.cell(row=start_row, column=1).value = "Статус"
        ws.cell(row=start_row, column=2).value = "Значення"
        format_header_row(ws, start_row, 2)

        row = start_row + 1
        for status, desc in items:
            fill = STATUS_FILLS.get(status)
            c1 = ws.cell(row=row, column=1)
            c1.value = status
            c1.font = LEGEND_BOLD_FONT
            c1.border = THIN_BORDER
            c2 = ws.cell(row=row, column=2)
            c2.value = desc
            c2.font = DATA_FONT
            c2.border = THIN_BORDER
            c2.alignment = WRAP
            if fill is not None:
                c1.fill = fill
                c2.fill = fill
            row += 1

        ws.column_dimensions["A"].width = 16
        ws.column_dimensions["B"].width = 70
        return row + 1

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path

    def to_bytes(self) -> bytes:
        """Serialize the workbook in memory (for HTTP downloads)."""
        buf = io.BytesIO()
        self.wb.save(buf)
        return buf.getvalue()
