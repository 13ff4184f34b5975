"""
Command-line interface for QuotePress.

Usage:
    quotepress export quote.json --format pdf --output quote.pdf
    quotepress export quote.json --format doc --settings settings.json
    quotepress paginate quote.json --json
    quotepress version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import load_document, load_settings
from .exceptions import QuotePressError
from .export import get_exporter, supported_formats
from .layout import Paginator
from .utils.rich_logger import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="quotepress",
        description="QuotePress - paginated quotes and estimations for print",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quotepress export quote.json --format pdf --output out.pdf
  quotepress export quote.json --format xlsx
  quotepress paginate quote.json --settings settings.json
  quotepress version
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    export_parser = subparsers.add_parser("export", help="Export a document")
    export_parser.add_argument("input", help="Document JSON file")
    export_parser.add_argument(
        "-f", "--format",
        choices=supported_formats(),
        default="pdf",
        help="Output format (default: pdf)"
    )
    export_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: document id with the format extension)"
    )
    export_parser.add_argument(
        "-s", "--settings",
        help="Settings JSON file (default: $QUOTEPRESS_SETTINGS or built-in defaults)"
    )

    paginate_parser = subparsers.add_parser("paginate", help="Show how a document is split into pages")
    paginate_parser.add_argument("input", help="Document JSON file")
    paginate_parser.add_argument(
        "-s", "--settings",
        help="Settings JSON file"
    )
    paginate_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def cmd_export(args, console: Console) -> int:
    """Handle export command."""
    document = load_document(args.input)
    settings = load_settings(args.settings)
    exporter_class = get_exporter(args.format)
    exporter = exporter_class(document, settings)

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = Path(args.input).parent / exporter.default_file_name()

    console.print(f"📄 Exporting {document.doc_id or Path(args.input).name} as {args.format}...")
    written = exporter.export_to_file(output_path)
    console.print(f"✅ Saved: {written}")
    return 0


def cmd_paginate(args, console: Console) -> int:
    """Handle paginate command."""
    document = load_document(args.input)
    settings = load_settings(args.settings)
    pages = Paginator(settings.paging_policy()).paginate(document.items)

    if args.json:
        console.print_json(json.dumps([page.get_page_info() for page in pages], ensure_ascii=False))
        return 0

    table = Table(title=f"{document.doc_id or Path(args.input).name}: {len(pages)} page(s)")
    table.add_column("Page", justify="right")
    table.add_column("Items", justify="right")
    table.add_column("Range")
    table.add_column("Header")
    table.add_column("Summary")
    for page in pages:
        info = page.get_page_info()
        item_range = f"{info['first_item']}-{info['last_item']}" if page.items else "-"
        table.add_row(
            f"{page.number}/{page.total_pages}",
            str(len(page.items)),
            item_range,
            "yes" if page.is_first_page else "",
            "yes" if page.is_last_page else "",
        )
    console.print(table)
    return 0


def cmd_version(args=None, console: Optional[Console] = None) -> int:
    """Handle version command."""
    from .version import __version__
    (console or Console()).print(f"QuotePress v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)
    console = Console()

    commands = {
        "export": cmd_export,
        "paginate": cmd_paginate,
        "version": cmd_version,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args, console)
    except QuotePressError as e:
        logger.debug("Command failed", exc_info=True)
        Console(stderr=True).print(f"Error: {e}", markup=False)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
