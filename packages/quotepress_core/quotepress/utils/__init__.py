"""
Utility helpers: numeral localization and logging setup.
"""

from .numerals import (
    ARABIC,
    LATIN,
    format_currency,
    format_number,
    format_text_with_arabic_numerals,
    localize_text,
    to_arabic_digits,
)
from .rich_logger import setup_logging

__all__ = [
    "ARABIC",
    "LATIN",
    "format_currency",
    "format_number",
    "format_text_with_arabic_numerals",
    "localize_text",
    "to_arabic_digits",
    "setup_logging",
]
