"""
QuotePress - quote and estimation documents for print.

Paginates a document's line items into A4 pages and renders the pages as
HTML preview, PDF or Word; line items also export to CSV and XLSX.

Quick Start:
    from quotepress import Document, Settings, paginate
    from quotepress.export import PDFExporter

    document = Document.from_dict(record)
    pages = paginate(document.items, Settings().paging_policy())
    PDFExporter(document).export_to_file("quote.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    QuotePressError,
    DocumentError,
    ConfigurationError,
    RenderingError,
    ExportError,
)
from .models import (
    TAX_RATE,
    Document,
    DocumentType,
    LineItem,
    Settings,
    Totals,
    make_doc_id,
)
from .layout import Page, PageFooter, Paginator, PagingPolicy, paginate

__all__ = [
    "__version__",
    "__version_info__",
    "QuotePressError",
    "DocumentError",
    "ConfigurationError",
    "RenderingError",
    "ExportError",
    "TAX_RATE",
    "Document",
    "DocumentType",
    "LineItem",
    "Settings",
    "Totals",
    "make_doc_id",
    "Page",
    "PageFooter",
    "Paginator",
    "PagingPolicy",
    "paginate",
]
