"""
Data model: line items, documents and settings.
"""

from .line_item import LineItem
from .document import TAX_RATE, Document, DocumentType, Totals, make_doc_id
from .settings import MAX_ITEMS_PER_PAGE, Settings

__all__ = [
    "LineItem",
    "Document",
    "DocumentType",
    "Totals",
    "TAX_RATE",
    "make_doc_id",
    "Settings",
    "MAX_ITEMS_PER_PAGE",
]
