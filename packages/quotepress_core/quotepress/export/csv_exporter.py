"""
CSV exporter for line items.

Writes the item table as CSV with a UTF-8 byte order mark so spreadsheet
programs detect the Arabic captions correctly.
"""

import csv
import io
import logging
from typing import Any, Dict, List

from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)

CSV_HEADERS = ["البيان", "الوحدة", "الكمية", "السعر", "الإجمالي"]


def _plain_number(value: float):
    return int(value) if float(value).is_integer() else value


class CSVExporter(BaseExporter):
    """
    Exports line items to CSV.
    """

    format_name = "csv"
    file_extension = ".csv"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # CSV-specific options
        self.delimiter = self.get_export_option('delimiter', ',')
        self.quotechar = self.get_export_option('quotechar', '"')
        self.include_headers = self.get_export_option('include_headers', True)
        self.include_bom = self.get_export_option('include_bom', True)

    def rows(self) -> List[List[Any]]:
        rows = []
        if self.include_headers:
            rows.append(list(CSV_HEADERS))
        for item in self.document.items:
            rows.append([
                item.description,
                item.unit,
                _plain_number(item.quantity),
                _plain_number(item.unit_price),
                _plain_number(item.line_total),
            ])
        return rows

    def export_to_string(self) -> str:
        """
        Export line items to a CSV string (without BOM).

        Returns:
            CSV content as string
        """
        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, quotechar=self.quotechar,
                            quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerows(self.rows())
        return output.getvalue()

    def export_to_bytes(self) -> bytes:
        encoding = "utf-8-sig" if self.include_bom else "utf-8"
        return self.export_to_string().encode(encoding)

    def get_export_info(self) -> Dict[str, Any]:
        info = super().get_export_info()
        info.update({
            'delimiter': self.delimiter,
            'include_headers': self.include_headers,
            'include_bom': self.include_bom,
        })
        return info
