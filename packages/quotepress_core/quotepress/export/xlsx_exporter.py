"""
XLSX exporter for line items.

Exports the item table and totals to a right-to-left worksheet using openpyxl.
"""

import io
import logging
from typing import Any, Dict

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.workbook.child import INVALID_TITLE_REGEX

from ..exceptions import ExportError
from .base_exporter import BaseExporter
from .csv_exporter import CSV_HEADERS

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(start_color='F2F2F2', end_color='F2F2F2', fill_type='solid')
MONEY_FORMAT = '#,##0.00'


def safe_sheet_title(name: str) -> str:
    """Sheet title with the characters Excel forbids replaced, at most 31 characters."""
    return INVALID_TITLE_REGEX.sub("-", name)[:31] or "Items"


class XLSXExporter(BaseExporter):
    """
    Exports line items and totals to XLSX.
    """

    format_name = "xlsx"
    file_extension = ".xlsx"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # XLSX-specific options
        self.apply_formatting = self.get_export_option('apply_formatting', True)
        self.auto_adjust_columns = self.get_export_option('auto_adjust_columns', True)
        self.include_totals = self.get_export_option('include_totals', True)
        self.sheet_name = self.get_export_option('sheet_name', self.document.doc_id or 'Items')

    def build_workbook(self) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = safe_sheet_title(self.sheet_name)
        ws.sheet_view.rightToLeft = True

        headers = ["م"] + CSV_HEADERS
        for col_idx, caption in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col_idx, value=caption)
            if self.apply_formatting:
                cell.font = Font(bold=True)
                cell.fill = HEADER_FILL
                cell.alignment = Alignment(horizontal='center')

        current_row = 2
        for number, item in enumerate(self.document.items, 1):
            values = [number, item.description, item.unit, item.quantity, item.unit_price, item.line_total]
            for col_idx, value in enumerate(values, 1):
                ws.cell(row=current_row, column=col_idx, value=value)
            if self.apply_formatting:
                ws.cell(row=current_row, column=2).alignment = Alignment(wrap_text=True, vertical='top')
                ws.cell(row=current_row, column=5).number_format = MONEY_FORMAT
                ws.cell(row=current_row, column=6).number_format = MONEY_FORMAT
            current_row += 1

        if self.include_totals:
            self._export_totals(ws, current_row + 1)

        if self.auto_adjust_columns:
            self._auto_adjust_columns(ws)
        return wb

    def _export_totals(self, ws, start_row: int) -> int:
        """Write subtotal, tax and grand total below the items."""
        totals = self.document.totals()
        rows = [
            ("المجموع", totals.sub_total),
            (f"الضريبة ({round(totals.tax_rate * 100)}%)", totals.tax_amount),
            ("الإجمالي الكلي", totals.total),
        ]
        current_row = start_row
        for label, value in rows:
            label_cell = ws.cell(row=current_row, column=5, value=label)
            value_cell = ws.cell(row=current_row, column=6, value=value)
            if self.apply_formatting:
                label_cell.font = Font(bold=True)
                value_cell.number_format = MONEY_FORMAT
            current_row += 1
        return current_row

    def _auto_adjust_columns(self, ws):
        """Auto-adjust column widths."""
        for column in ws.columns:
            column_letter = get_column_letter(column[0].column)
            max_length = max((len(str(cell.value)) for cell in column if cell.value is not None), default=0)
            ws.column_dimensions[column_letter].width = min(max_length + 2, 60)  # Cap at 60 characters

    def export_to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        try:
            self.build_workbook().save(buffer)
        except (IllegalCharacterError, ValueError) as e:
            logger.error(f"Failed to build workbook for {self.document.doc_id or 'draft'}: {e}")
            raise ExportError("Failed to build XLSX workbook", str(e)) from e
        return buffer.getvalue()

    def get_export_info(self) -> Dict[str, Any]:
        info = super().get_export_info()
        info.update({
            'apply_formatting': self.apply_formatting,
            'auto_adjust_columns': self.auto_adjust_columns,
            'include_totals': self.include_totals,
            'sheet_name': self.sheet_name,
        })
        return info
