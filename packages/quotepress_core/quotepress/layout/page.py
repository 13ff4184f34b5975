"""
Page produced by the paginator.

A page is one print-ready slice of a document's items plus the flags that
tell a renderer which decorations to draw on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from ..models.line_item import LineItem


@dataclass(frozen=True, slots=True)
class Page:
    """
    One logical page.

    Attributes:
        items: Item slice printed on this page
        start_index: 0-based index of the first item in the whole document
        number: 1-based page ordinal
        total_pages: Page count of the whole document
        is_first_page: Draw the document header block
        is_last_page: Draw the summary block (totals, terms, payment)
    """

    items: Tuple[LineItem, ...]
    start_index: int
    number: int
    total_pages: int
    is_first_page: bool
    is_last_page: bool

    @property
    def end_index(self) -> int:
        """Index one past the last item of this page."""
        return self.start_index + len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def numbered_items(self) -> Iterator[Tuple[int, LineItem]]:
        """Yield ``(absolute 1-based number, item)`` pairs."""
        for offset, item in enumerate(self.items):
            yield self.start_index + offset + 1, item

    def get_page_info(self) -> Dict[str, Any]:
        return {
            "page_number": self.number,
            "total_pages": self.total_pages,
            "item_count": len(self.items),
            "first_item": self.start_index + 1 if self.items else None,
            "last_item": self.end_index if self.items else None,
            "is_first_page": self.is_first_page,
            "is_last_page": self.is_last_page,
        }
