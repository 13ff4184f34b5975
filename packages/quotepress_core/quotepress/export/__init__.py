"""
Export module: write documents as PDF, Word, HTML, CSV or XLSX.
"""

from typing import Dict, List, Type

from ..exceptions import ExportError
from .base_exporter import BaseExporter
from .csv_exporter import CSVExporter
from .html_exporter import HTMLExporter
from .pdf_exporter import PDFExporter
from .word_exporter import WordExporter
from .xlsx_exporter import XLSXExporter

EXPORTERS: Dict[str, Type[BaseExporter]] = {
    "pdf": PDFExporter,
    "doc": WordExporter,
    "html": HTMLExporter,
    "csv": CSVExporter,
    "xlsx": XLSXExporter,
}


def supported_formats() -> List[str]:
    return list(EXPORTERS)


def get_exporter(fmt: str) -> Type[BaseExporter]:
    """
    Look up the exporter class for a format name.

    Raises:
        ExportError: If the format is unknown
    """
    try:
        return EXPORTERS[fmt.lower()]
    except (KeyError, AttributeError):
        raise ExportError("Unsupported export format", repr(fmt)) from None


__all__ = [
    "BaseExporter",
    "CSVExporter",
    "HTMLExporter",
    "PDFExporter",
    "WordExporter",
    "XLSXExporter",
    "EXPORTERS",
    "get_exporter",
    "supported_formats",
]
