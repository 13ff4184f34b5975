"""
PDF renderer using ReportLab.

Draws each page on an A4 canvas, right to left: the index column sits at
the right edge and text is right-aligned. Capacity decisions come from the
paginator; this renderer only draws what each page carries.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from reportlab.lib.colors import Color, black
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from ..exceptions import RenderingError
from ..layout import Page
from ..models import Document, Settings
from .base_renderer import BaseRenderer, Column
from .font_registry import resolve_fonts

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN_LEFT = 15 * mm
MARGIN_RIGHT = 15 * mm
MARGIN_TOP = 15 * mm
MARGIN_BOTTOM = 20 * mm
CONTENT_WIDTH = PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT

HEADER_IMAGE_HEIGHT = 25 * mm
TITLE_FONT_SIZE = 14
BODY_FONT_SIZE = 10
TABLE_FONT_SIZE = 8
FOOTER_FONT_SIZE = 8
CELL_PADDING = 1.5 * mm
LEADING_FACTOR = 1.25
FOOTER_HEIGHT = 16 * mm

HEADER_FILL = Color(0.95, 0.95, 0.95)
GRID_COLOR = Color(0.8, 0.8, 0.8)


class PDFRenderer(BaseRenderer):
    """Renders paginated documents to PDF bytes."""

    def __init__(self, document: Document, settings: Optional[Settings] = None,
                 options: Optional[Dict[str, Any]] = None):
        super().__init__(document, settings, options)
        self.font_name, self.bold_font_name = resolve_fonts(self.settings.font_path)

    def render_to_bytes(self) -> bytes:
        """Render every page and return the PDF bytes."""
        pages = self.paginate()
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4, invariant=1)
        pdf.setTitle(f"{self.document.doc_type.title} {self.document.doc_id}".strip())
        pdf.setSubject(self.document.subject)

        header_image = self._load_header_image()
        for page in pages:
            self._draw_page(pdf, page, header_image)
            pdf.showPage()
        pdf.save()

        logger.debug(f"Rendered {len(pages)} pages to PDF")
        return buffer.getvalue()

    def render_to_file(self, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.render_to_bytes())
        return output_path

    def _load_header_image(self) -> Optional[ImageReader]:
        source = self.settings.header_image
        if not source:
            return None
        try:
            return ImageReader(source)
        except Exception as e:
            raise RenderingError("Failed to load header image", f"{source}: {e}") from e

    # Drawing

    def _draw_page(self, pdf: canvas.Canvas, page: Page, header_image: Optional[ImageReader]) -> None:
        y = PAGE_HEIGHT - MARGIN_TOP
        if page.is_first_page:
            y = self._draw_header(pdf, y, header_image)
        y = self._draw_items(pdf, y, page)
        if page.is_last_page:
            y = self._draw_summary(pdf, y - 4 * mm)

        if y < MARGIN_BOTTOM + FOOTER_HEIGHT:
            self.logger.warning(f"Content of page {page.number} runs into the footer area")
        self._draw_footer(pdf, page)

    def _draw_header(self, pdf: canvas.Canvas, y: float, header_image: Optional[ImageReader]) -> float:
        right = PAGE_WIDTH - MARGIN_RIGHT
        if header_image is not None:
            pdf.drawImage(header_image, MARGIN_LEFT, y - HEADER_IMAGE_HEIGHT,
                          width=CONTENT_WIDTH, height=HEADER_IMAGE_HEIGHT,
                          preserveAspectRatio=True, anchor="c", mask="auto")
            y -= HEADER_IMAGE_HEIGHT + 4 * mm

        fields = self.header_fields()
        pdf.setFont(self.bold_font_name, TITLE_FONT_SIZE)
        y -= TITLE_FONT_SIZE
        pdf.drawCentredString(PAGE_WIDTH / 2, y, fields["title"])
        y -= 6 * mm

        pdf.setFont(self.font_name, BODY_FONT_SIZE)
        pdf.drawRightString(right, y, fields["date"])
        pdf.drawString(MARGIN_LEFT, y, fields["doc_id"])
        y -= BODY_FONT_SIZE * 1.6
        pdf.drawRightString(right, y, f"السادة/ {fields['client']}")
        y -= BODY_FONT_SIZE * 1.6
        pdf.drawRightString(right, y, f"الموضوع: {fields['subject']}")
        return y - 5 * mm

    def _wrap(self, text: str, width: float, font_name: str, font_size: float) -> List[str]:
        lines: List[str] = []
        for paragraph in (text or "").split("\n"):
            lines.extend(simpleSplit(paragraph, font_name, font_size, width) or [""])
        return lines or [""]

    def _draw_row(self, pdf: canvas.Canvas, y: float, columns: List[Column], texts: List[str],
                  font_name: str, fill: Optional[Color] = None) -> float:
        leading = TABLE_FONT_SIZE * LEADING_FACTOR
        wrapped = [
            self._wrap(text, column.width * CONTENT_WIDTH - 2 * CELL_PADDING, font_name, TABLE_FONT_SIZE)
            for column, text in zip(columns, texts)
        ]
        height = max(len(lines) for lines in wrapped) * leading + 2 * CELL_PADDING

        pdf.setFont(font_name, TABLE_FONT_SIZE)
        pdf.setStrokeColor(GRID_COLOR)
        x_right = PAGE_WIDTH - MARGIN_RIGHT
        for column, lines in zip(columns, wrapped):
            width = column.width * CONTENT_WIDTH
            x_left = x_right - width
            if fill is not None:
                pdf.setFillColor(fill)
                pdf.rect(x_left, y - height, width, height, stroke=1, fill=1)
                pdf.setFillColor(black)
            else:
                pdf.rect(x_left, y - height, width, height, stroke=1, fill=0)

            text_y = y - CELL_PADDING - TABLE_FONT_SIZE
            for line in lines:
                if column.align == "center":
                    pdf.drawCentredString(x_left + width / 2, text_y, line)
                else:
                    pdf.drawRightString(x_right - CELL_PADDING, text_y, line)
                text_y -= leading
            x_right = x_left
        return y - height

    def _draw_items(self, pdf: canvas.Canvas, y: float, page: Page) -> float:
        columns = self.columns()
        y = self._draw_row(pdf, y, columns, [c.caption for c in columns], self.bold_font_name, HEADER_FILL)
        for number, item in page.numbered_items():
            texts = [self.cell_text(column, number, item) for column in columns]
            y = self._draw_row(pdf, y, columns, texts, self.font_name)
        return y

    def _draw_summary(self, pdf: canvas.Canvas, y: float) -> float:
        right = PAGE_WIDTH - MARGIN_RIGHT
        terms_width = CONTENT_WIDTH * 0.6 - 3 * mm
        leading = TABLE_FONT_SIZE * LEADING_FACTOR

        # Terms and payment on the right, totals on the left
        terms_y = y
        for caption, text in self.terms_blocks():
            pdf.setFont(self.bold_font_name, BODY_FONT_SIZE)
            terms_y -= BODY_FONT_SIZE
            pdf.drawRightString(right, terms_y, caption)
            terms_y -= 2 * mm
            pdf.setFont(self.font_name, TABLE_FONT_SIZE)
            for line in self._wrap(text, terms_width, self.font_name, TABLE_FONT_SIZE):
                terms_y -= leading
                pdf.drawRightString(right, terms_y, line)
            terms_y -= 3 * mm

        totals_width = CONTENT_WIDTH * 0.4
        label_width = totals_width * 0.5
        row_height = leading + 2 * CELL_PADDING
        totals_y = y
        rows = self.summary_rows()
        pdf.setStrokeColor(GRID_COLOR)
        for index, (label, value) in enumerate(rows):
            is_total = index == len(rows) - 1
            if is_total:
                pdf.setFillColor(HEADER_FILL)
                pdf.rect(MARGIN_LEFT, totals_y - row_height, totals_width, row_height, stroke=1, fill=1)
                pdf.setFillColor(black)
            else:
                pdf.rect(MARGIN_LEFT, totals_y - row_height, totals_width, row_height, stroke=1, fill=0)
            pdf.line(MARGIN_LEFT + totals_width - label_width, totals_y,
                     MARGIN_LEFT + totals_width - label_width, totals_y - row_height)

            text_y = totals_y - CELL_PADDING - TABLE_FONT_SIZE
            pdf.setFont(self.bold_font_name, TABLE_FONT_SIZE)
            pdf.drawRightString(MARGIN_LEFT + totals_width - CELL_PADDING, text_y, label)
            pdf.setFont(self.bold_font_name if is_total else self.font_name, TABLE_FONT_SIZE)
            pdf.drawRightString(MARGIN_LEFT + totals_width - label_width - CELL_PADDING, text_y, value)
            totals_y -= row_height

        return min(terms_y, totals_y)

    def _draw_footer(self, pdf: canvas.Canvas, page: Page) -> None:
        top = MARGIN_BOTTOM + FOOTER_HEIGHT
        pdf.setStrokeColor(black)
        pdf.setLineWidth(1.5)
        pdf.line(MARGIN_LEFT, top, PAGE_WIDTH - MARGIN_RIGHT, top)
        pdf.setLineWidth(1)

        pdf.setFont(self.font_name, FOOTER_FONT_SIZE)
        y = top - FOOTER_FONT_SIZE - 1 * mm
        for line in self.footer.lines():
            pdf.drawCentredString(PAGE_WIDTH / 2, y, line)
            y -= FOOTER_FONT_SIZE * LEADING_FACTOR
        pdf.drawCentredString(PAGE_WIDTH / 2, MARGIN_BOTTOM - FOOTER_FONT_SIZE, self.footer.page_label(page))
