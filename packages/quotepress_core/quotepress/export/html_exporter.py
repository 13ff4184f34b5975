"""
HTML exporter.

Writes the paginated HTML preview to a file.
"""

import logging

from ..renderers import HTMLRenderer
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class HTMLExporter(BaseExporter):
    """
    Exports the document preview as standalone HTML.
    """

    format_name = "html"
    file_extension = ".html"

    def export_to_string(self) -> str:
        return HTMLRenderer(self.document, self.settings, self.export_options).render()

    def export_to_bytes(self) -> bytes:
        return self.export_to_string().encode("utf-8")
