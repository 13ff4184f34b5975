"""
Layout module: pagination of line items into printed pages.
"""

from .paging_policy import PagingPolicy
from .page import Page
from .paginator import Paginator, paginate
from .footer import PageFooter

__all__ = [
    "PagingPolicy",
    "Page",
    "Paginator",
    "paginate",
    "PageFooter",
]
