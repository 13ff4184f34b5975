"""
PDF exporter.

Thin wrapper over :class:`PDFRenderer` with the exporter interface.
"""

import logging

from ..renderers import PDFRenderer
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class PDFExporter(BaseExporter):
    """
    Exports the document as an A4 PDF.
    """

    format_name = "pdf"
    file_extension = ".pdf"

    def export_to_bytes(self) -> bytes:
        return PDFRenderer(self.document, self.settings, self.export_options).render_to_bytes()
