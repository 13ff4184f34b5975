"""
HTML renderer for document preview and Word export.

Produces a right-to-left A4 HTML document with one ``<section>`` per page.
"""

from __future__ import annotations

import html
import logging
from typing import List

from ..layout import Page
from .base_renderer import BaseRenderer

logger = logging.getLogger(__name__)

PRINT_CSS = """
body {
  font-family: 'PT Sans', 'Arial', sans-serif;
  direction: rtl;
  line-height: 1.4;
  color: #000;
  margin: 0;
  background-color: #fff;
  -webkit-print-color-adjust: exact;
  print-color-adjust: exact;
}
@page {
  size: A4 portrait;
  margin: 15mm 15mm 20mm 15mm;
}
div.WordSection1 { page: WordSection1; }
section.page {
  width: 180mm;
  min-height: 262mm;
  font-size: 10pt;
  display: flex;
  flex-direction: column;
}
section.page + section.page { page-break-before: always; }
.doc-header img { width: 100%; height: auto; }
.doc-title { text-align: center; font-size: 14pt; font-weight: bold; text-decoration: underline; }
.doc-meta { display: flex; justify-content: space-between; }
table { width: 100%; border-collapse: collapse; }
thead { display: table-header-group; }
tr, td, th { page-break-inside: avoid; }
td, th { border: 1px solid #ccc; padding: 5px; vertical-align: top; }
th, .total-row td { background-color: #f2f2f2; font-weight: bold; }
.pre { white-space: pre-wrap; }
.summary { display: flex; justify-content: space-between; gap: 12px; margin-top: auto; padding-top: 12px; page-break-inside: avoid; }
.summary .terms { width: 60%; }
.summary .totals { width: 40%; }
.page-footer { margin-top: 12px; padding-top: 5px; border-top: 2px solid #000; text-align: center; font-size: 9pt; }
""".strip()


def _esc(text: str) -> str:
    return html.escape(text or "", quote=True)


class HTMLRenderer(BaseRenderer):
    """
    Renders paginated documents to HTML.

    The first page carries the header block, the last page the summary,
    every page the footer.
    """

    def render(self) -> str:
        """Render a complete HTML document."""
        pages = self.paginate()
        title = _esc(f"{self.document.doc_type.title} {self.document.doc_id}".strip())
        parts = [
            "<!DOCTYPE html>",
            '<html lang="ar" dir="rtl">',
            "<head>",
            '<meta charset="UTF-8">',
            f"<title>{title}</title>",
            f"<style>\n{PRINT_CSS}\n</style>",
            "</head>",
            "<body>",
            self.render_body(pages),
            "</body>",
            "</html>",
        ]
        logger.debug(f"Rendered {len(pages)} pages to HTML")
        return "\n".join(parts)

    def render_body(self, pages: List[Page]) -> str:
        """Render the page sections wrapped in the Word section container."""
        sections = [self.render_page(page) for page in pages]
        return '<div class="WordSection1">\n' + "\n".join(sections) + "\n</div>"

    def render_page(self, page: Page) -> str:
        parts = [f'<section class="page" data-page="{page.number}">']
        if page.is_first_page:
            parts.append(self._render_header())
        parts.append(self._render_items(page))
        if page.is_last_page:
            parts.append(self._render_summary())
        parts.append(self._render_footer(page))
        parts.append("</section>")
        return "\n".join(parts)

    def _render_header(self) -> str:
        fields = self.header_fields()
        parts = ['<header class="doc-header">']
        if self.settings.header_image:
            parts.append(f'<img src="{_esc(self.settings.header_image)}" alt="Company Header">')
        parts.append(f'<h2 class="doc-title">{_esc(fields["title"])}</h2>')
        parts.append(
            f'<div class="doc-meta"><span>{_esc(fields["date"])}</span>'
            f'<span>{_esc(fields["doc_id"])}</span></div>'
        )
        parts.append(f'<p><b>السادة/</b> {_esc(fields["client"])}</p>')
        parts.append(f'<p><b>الموضوع:</b> {_esc(fields["subject"])}</p>')
        parts.append("</header>")
        return "\n".join(parts)

    def _render_items(self, page: Page) -> str:
        columns = self.columns()
        head = "".join(
            f'<th style="width:{column.width * 100:.0f}%">{_esc(column.caption)}</th>'
            for column in columns
        )
        rows = []
        for number, item in page.numbered_items():
            cells = "".join(
                f'<td class="pre" style="text-align:{column.align}">'
                f"{_esc(self.cell_text(column, number, item))}</td>"
                for column in columns
            )
            rows.append(f"<tr>{cells}</tr>")
        return (
            '<table class="items">\n'
            f"<thead><tr>{head}</tr></thead>\n"
            "<tbody>\n" + "\n".join(rows) + "\n</tbody>\n</table>"
        )

    def _render_summary(self) -> str:
        parts = ['<div class="summary">', '<div class="terms">']
        for caption, text in self.terms_blocks():
            parts.append(f"<h3>{_esc(caption)}</h3>")
            parts.append(f'<div class="pre">{_esc(text)}</div>')
        parts.append("</div>")

        parts.append('<div class="totals"><table>')
        rows = self.summary_rows()
        for index, (label, value) in enumerate(rows):
            row_class = ' class="total-row"' if index == len(rows) - 1 else ""
            parts.append(f"<tr{row_class}><td>{_esc(label)}</td><td>{_esc(value)}</td></tr>")
        parts.append("</table></div>")
        parts.append("</div>")
        return "\n".join(parts)

    def _render_footer(self, page: Page) -> str:
        lines = "".join(f"<p>{_esc(line)}</p>" for line in self.footer.lines())
        label = _esc(self.footer.page_label(page))
        return f'<footer class="page-footer">{lines}<p class="page-label">{label}</p></footer>'
