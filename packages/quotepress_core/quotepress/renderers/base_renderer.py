"""
Base renderer shared by the HTML, Word and PDF outputs.

All renderers paginate through the same :class:`Paginator` and read their
column set, captions and number formatting from here, so every output
format prints the same pages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..layout import Page, PageFooter, Paginator
from ..models import Document, LineItem, Settings, Totals
from ..utils.numerals import format_currency, format_number, localize_text

logger = logging.getLogger(__name__)

DRAFT_DOC_ID = "[سيتم إنشاؤه عند الحفظ]"
DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class Column:
    """One item-table column."""
    key: str
    caption: str
    width: float  # share of the table width
    align: str = "center"


class BaseRenderer:
    """
    Base class for page renderers.

    Subclasses draw each :class:`Page` returned by :meth:`paginate`: the
    header block on the first page, the item rows, the summary block on
    the last page and the footer on every page.
    """

    def __init__(self, document: Document, settings: Optional[Settings] = None,
                 options: Optional[Dict[str, Any]] = None):
        """
        Initialize renderer.

        Args:
            document: Document to render
            settings: Branding and paging settings (defaults if omitted)
            options: Renderer-specific options
        """
        self.document = document
        self.settings = settings or Settings()
        self.options = options or {}
        self.footer = PageFooter(self.settings.footer_text, self.settings.numerals)
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    def paginate(self) -> List[Page]:
        return Paginator(self.settings.paging_policy()).paginate(self.document.items)

    # Formatting

    def text(self, value: str) -> str:
        return localize_text(value or "", self.settings.numerals)

    def number(self, value: float) -> str:
        return format_number(value, self.settings.numerals)

    def money(self, amount: float) -> str:
        return format_currency(amount, self.settings.currency, self.settings.numerals)

    # Layout content

    def columns(self) -> List[Column]:
        """Visible item-table columns in print order."""
        doc_type = self.document.doc_type
        settings = self.settings
        candidates = [
            (settings.show_index_column, Column("index", "م", 0.05)),
            (True, Column("description", doc_type.description_caption, 0.45, "right")),
            (settings.show_unit_column, Column("unit", "الوحدة", 0.10)),
            (settings.show_quantity_column, Column("quantity", doc_type.quantity_caption, 0.10)),
            (settings.show_price_column, Column("price", "السعر", 0.15, "right")),
            (settings.show_total_column, Column("total", "الإجمالي", 0.15, "right")),
        ]
        visible = [column for shown, column in candidates if shown]

        # Widths of hidden columns go to the description column
        spare = 1.0 - sum(column.width for column in visible)
        return [
            Column(c.key, c.caption, c.width + spare, c.align) if c.key == "description" else c
            for c in visible
        ]

    def cell_text(self, column: Column, number: int, item: LineItem) -> str:
        if column.key == "index":
            return self.number(number)
        if column.key == "description":
            return self.text(item.description)
        if column.key == "unit":
            return self.text(item.unit)
        if column.key == "quantity":
            return self.number(item.quantity)
        if column.key == "price":
            return self.money(item.unit_price)
        if column.key == "total":
            return self.money(item.line_total)
        raise KeyError(column.key)

    def header_fields(self) -> Dict[str, str]:
        """Texts of the document header block printed on the first page."""
        document = self.document
        title = document.doc_type.title
        return {
            "title": title,
            "date": f"التاريخ: {document.created_at.strftime(DATE_FORMAT)}",
            "doc_id": f"{title} رقم: {document.doc_id or DRAFT_DOC_ID}",
            "client": document.client_name or "اسم الجهة",
            "subject": self.text(document.subject or "موضوع المستند"),
        }

    def summary_rows(self, totals: Optional[Totals] = None) -> List[Tuple[str, str]]:
        """Label/value rows of the financial summary."""
        totals = totals or self.document.totals()
        tax_percent = self.number(round(totals.tax_rate * 100))
        return [
            ("المجموع", self.money(totals.sub_total)),
            (f"الضريبة ({tax_percent}%)", self.money(totals.tax_amount)),
            ("الإجمالي الكلي", self.money(totals.total)),
        ]

    def terms_blocks(self) -> List[Tuple[str, str]]:
        """Terms and payment blocks; quotes only."""
        if not self.document.is_quote:
            return []
        return [
            ("الشروط:", self.text(self.document.terms)),
            ("طريقة الدفع:", self.text(self.document.payment_method)),
        ]
