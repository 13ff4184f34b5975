"""
Paginator for quote and estimation documents.

Partitions a document's line items into A4 pages using a content-aware
capacity, and marks the first page (document header block) and the last
page (summary block). Every renderer consumes the same page list.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..models.line_item import LineItem
from .page import Page
from .paging_policy import PagingPolicy

logger = logging.getLogger(__name__)


class Paginator:
    """
    Splits line items into pages.

    Pagination is a pure function of the items and the policy: it never
    fails and always returns at least one page.
    """

    def __init__(self, policy: Optional[PagingPolicy] = None):
        """
        Initialize paginator.

        Args:
            policy: Paging policy (defaults to ``PagingPolicy()``)
        """
        self.policy = policy or PagingPolicy()

    def page_capacity(self, items: Sequence[LineItem], cursor: int, page_index: int) -> int:
        """
        Capacity of the page about to be cut at ``cursor``.

        Inspects the next ``base_items_per_page`` items; if enough of them
        have long descriptions the page gets the shrunk capacity.
        """
        policy = self.policy
        window = items[cursor:cursor + policy.base_items_per_page]
        long_count = sum(1 for item in window if policy.is_long(item.description))

        if window and long_count >= policy.saturation_count(len(window)):
            return policy.long_capacity(page_index)
        return policy.normal_capacity(page_index)

    def split(self, items: Sequence[LineItem]) -> List[Tuple[int, Tuple[LineItem, ...]]]:
        """Return ``(start_index, slice)`` pairs covering all items in order."""
        slices = []
        cursor = 0
        total = len(items)

        while cursor < total:
            capacity = self.page_capacity(items, cursor, len(slices))
            chunk = tuple(items[cursor:cursor + capacity])
            slices.append((cursor, chunk))
            cursor += len(chunk)

        return slices

    def paginate(self, items: Sequence[LineItem]) -> List[Page]:
        """
        Paginate line items.

        Args:
            items: Line items in print order

        Returns:
            Non-empty list of pages
        """
        items = list(items)
        slices = self.split(items) or [(0, ())]
        total_pages = len(slices)
        last = total_pages - 1

        pages = [
            Page(
                items=chunk,
                start_index=start,
                number=index + 1,
                total_pages=total_pages,
                is_first_page=index == 0,
                is_last_page=index == last,
            )
            for index, (start, chunk) in enumerate(slices)
        ]

        logger.debug(
            f"Paginated {len(items)} items into {total_pages} pages: "
            f"{[len(page.items) for page in pages]}"
        )
        return pages


def paginate(items: Sequence[LineItem], policy: Optional[PagingPolicy] = None) -> List[Page]:
    """Paginate ``items`` with ``policy``; see :class:`Paginator`."""
    return Paginator(policy).paginate(items)
