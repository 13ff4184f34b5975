"""
Page footer for printed documents.

Every page carries the company footer text and a "page N of M" label.
"""

from dataclasses import dataclass
from typing import List

from ..utils.numerals import ARABIC, to_arabic_digits
from .page import Page

PAGE_LABEL_TEMPLATES = {
    "arabic": "صفحة {number} من {total}",
    "latin": "Page {number} of {total}",
}


@dataclass(frozen=True)
class PageFooter:
    """Footer text plus the page label."""

    text: str = ""
    numerals: str = ARABIC

    def page_label(self, page: Page) -> str:
        template = PAGE_LABEL_TEMPLATES.get(self.numerals, PAGE_LABEL_TEMPLATES["latin"])
        label = template.format(number=page.number, total=page.total_pages)
        if self.numerals == ARABIC:
            return to_arabic_digits(label)
        return label

    def lines(self) -> List[str]:
        """Footer text split into printed lines, blank lines dropped."""
        return [line for line in (self.text or "").splitlines() if line.strip()]
