"""
Paging policy: how many line items fit on a printed page.

Capacities are heuristics, not text measurement. A page fits either many
short rows or a few long wrapped rows, so the policy shrinks capacity when
most items of a candidate page carry long descriptions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_ITEMS_PER_PAGE = 13
LONG_DESCRIPTION_LENGTH = 200
LONG_DESCRIPTION_RATIO = 0.5
FIRST_PAGE_LONG_CAPACITY = 6
CONTINUATION_LONG_CAPACITY = 8


def _at_least_one(value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 1
    return max(1, number)


@dataclass(frozen=True, slots=True)
class PagingPolicy:
    """
    Capacity configuration for the paginator.

    Attributes:
        base_items_per_page: Nominal item count for the first page
        continuation_items_per_page: Item count for pages after the first
            (pages without the document header block); defaults to the base
        long_description_length: Descriptions longer than this are "long"
        long_description_ratio: Share of the inspected window that must be
            long before the page capacity shrinks
        first_page_long_capacity: Shrunk capacity for the first page
        continuation_long_capacity: Shrunk capacity for later pages
    """

    base_items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    continuation_items_per_page: Optional[int] = None
    long_description_length: int = LONG_DESCRIPTION_LENGTH
    long_description_ratio: float = LONG_DESCRIPTION_RATIO
    first_page_long_capacity: int = FIRST_PAGE_LONG_CAPACITY
    continuation_long_capacity: int = CONTINUATION_LONG_CAPACITY

    def __post_init__(self) -> None:
        # Capacities are clamped rather than rejected so pagination stays total
        object.__setattr__(self, "base_items_per_page", _at_least_one(self.base_items_per_page))
        if self.continuation_items_per_page is None:
            object.__setattr__(self, "continuation_items_per_page", self.base_items_per_page)
        else:
            object.__setattr__(
                self, "continuation_items_per_page", _at_least_one(self.continuation_items_per_page)
            )
        object.__setattr__(self, "first_page_long_capacity", _at_least_one(self.first_page_long_capacity))
        object.__setattr__(self, "continuation_long_capacity", _at_least_one(self.continuation_long_capacity))
        object.__setattr__(self, "long_description_length", max(0, int(self.long_description_length)))
        ratio = float(self.long_description_ratio)
        object.__setattr__(self, "long_description_ratio", min(1.0, max(0.0, ratio)))

    def normal_capacity(self, page_index: int) -> int:
        """Capacity of the page at ``page_index`` (0-based) with short content."""
        if page_index == 0:
            return self.base_items_per_page
        return self.continuation_items_per_page

    def long_capacity(self, page_index: int) -> int:
        """Shrunk capacity, never larger than the normal capacity."""
        shrunk = self.first_page_long_capacity if page_index == 0 else self.continuation_long_capacity
        return min(shrunk, self.normal_capacity(page_index))

    def is_long(self, description: str) -> bool:
        return len(description or "") > self.long_description_length

    def saturation_count(self, window_size: int) -> int:
        """Number of long descriptions in a window that triggers the shrink."""
        return max(1, math.ceil(self.long_description_ratio * window_size))
