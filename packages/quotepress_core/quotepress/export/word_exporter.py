"""
Word exporter.

Word opens HTML saved with a ``.doc`` extension when it is wrapped in the
Office namespaces; the page sections come from :class:`HTMLRenderer`, so
the Word output paginates exactly like the preview and the PDF.
"""

import html
import logging

from ..renderers import HTMLRenderer
from ..renderers.html_renderer import PRINT_CSS
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)

WORD_DOCUMENT_XML = """<!--[if gte mso 9]>
<xml>
  <w:WordDocument>
    <w:View>Print</w:View>
    <w:Zoom>100</w:Zoom>
    <w:DoNotOptimizeForBrowser/>
    <w:RtlGutter/>
  </w:WordDocument>
</xml>
<![endif]-->"""

WORD_PAGE_CSS = """
@page WordSection1 {
  size: 595.3pt 841.9pt;
  margin: 42.5pt 42.5pt 56.7pt 42.5pt;
}
""".strip()


class WordExporter(BaseExporter):
    """
    Exports the document as Word-compatible HTML (``.doc``).
    """

    format_name = "doc"
    file_extension = ".doc"

    def export_to_string(self) -> str:
        renderer = HTMLRenderer(self.document, self.settings, self.export_options)
        pages = renderer.paginate()
        title = html.escape(self.document.doc_id or "document")

        return "\n".join([
            "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
            "xmlns:w='urn:schemas-microsoft-com:office:word' "
            "xmlns='http://www.w3.org/TR/REC-html40'>",
            "<head>",
            "<meta charset='utf-8'>",
            f"<title>{title}</title>",
            WORD_DOCUMENT_XML,
            f"<style>\n{PRINT_CSS}\n{WORD_PAGE_CSS}\n</style>",
            "</head>",
            "<body lang=AR-SA dir=rtl>",
            renderer.render_body(pages),
            "</body>",
            "</html>",
        ])

    def export_to_bytes(self) -> bytes:
        # Word needs the BOM to pick UTF-8 for HTML documents
        return self.export_to_string().encode("utf-8-sig")
