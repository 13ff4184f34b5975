#!/usr/bin/env python3
"""
Example of the QuotePress API.

Builds a quote, shows how it is paginated and exports it in every format.
"""

from pathlib import Path

from quotepress import Document, DocumentType, LineItem, Settings, make_doc_id, paginate
from quotepress.export import EXPORTERS


def main():
    """Build, paginate and export a sample quote."""
    settings = Settings(
        footer_text="Acme Contracting\nCairo\n+20 100 000 0000",
        items_per_page=13,
    )

    items = [
        LineItem(f"Ceramic tiles, batch {n}", "m2", 40 + n, 185.0)
        for n in range(1, 21)
    ]
    document = Document(
        doc_type=DocumentType.QUOTE,
        client_name="Nile Towers",
        subject="Flooring works, building B",
        items=tuple(items),
        terms=settings.default_terms,
        payment_method="Bank transfer",
        doc_id=make_doc_id(DocumentType.QUOTE, 1),
    )

    # 1. Paginate
    print("📄 Paginating...")
    for page in paginate(document.items, settings.paging_policy()):
        print(f"   Page {page.number}/{page.total_pages}: items "
              f"{page.start_index + 1}-{page.end_index}"
              f"{' (header)' if page.is_first_page else ''}"
              f"{' (summary)' if page.is_last_page else ''}")

    # 2. Export
    output_dir = Path("output")
    for fmt, exporter_class in EXPORTERS.items():
        exporter = exporter_class(document, settings)
        path = exporter.export_to_file(output_dir / exporter.default_file_name())
        print(f"   ✅ {fmt}: {path}")


if __name__ == "__main__":
    main()
