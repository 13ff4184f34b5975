"""
Entry point for running QuotePress as a module.

Usage:
    python -m quotepress export quote.json --format pdf --output quote.pdf
    python -m quotepress paginate quote.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
