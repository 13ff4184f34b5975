"""
Numeral and text localization.

Converts Western digits to Arabic-Indic digits and keeps numbers visually
separated from adjacent words. Renderers apply these at draw time; the
paginator never touches text.
"""

import re
from typing import Any

ARABIC = "arabic"
LATIN = "latin"
NUMERAL_SYSTEMS = (ARABIC, LATIN)

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")

ARABIC_THOUSANDS_SEPARATOR = "٬"

CURRENCY_SIGNS = {
    "EGP": "ج.م.",
}

# Characters that belong to a number token: digits, separators, percent, dashes
_NUMERIC = "٠-٩.,%—-"
_SPACE_AFTER_NUMBER = re.compile(rf"([٠-٩][{_NUMERIC}]*)(?=[^\s{_NUMERIC}])")
_SPACE_BEFORE_NUMBER = re.compile(rf"(?<=[^\s{_NUMERIC}])([٠-٩])")


def to_arabic_digits(text: Any) -> str:
    """Replace ``0-9`` with ``٠-٩``."""
    if not isinstance(text, str):
        return ""
    return text.translate(_ARABIC_DIGITS)


def format_text_with_arabic_numerals(text: Any) -> str:
    """
    Localize digits in free text and pad numbers with single spaces.

    ``"قيمة14%شامل"`` becomes ``"قيمة ١٤% شامل"``. Existing spaces are
    kept as they are.

    Args:
        text: Free text (non-strings give an empty string)

    Returns:
        Localized text
    """
    if not isinstance(text, str):
        return ""
    processed = text.translate(_ARABIC_DIGITS)
    processed = _SPACE_AFTER_NUMBER.sub(r"\1 ", processed)
    processed = _SPACE_BEFORE_NUMBER.sub(r" \1", processed)
    return processed


def localize_text(text: Any, numerals: str = ARABIC) -> str:
    """Apply the localization for ``numerals`` to free text."""
    if not isinstance(text, str):
        return ""
    if numerals == ARABIC:
        return format_text_with_arabic_numerals(text)
    return text


def format_number(value: float, numerals: str = ARABIC) -> str:
    """
    Format a quantity without grouping separators.

    Whole numbers print without decimals; other values keep up to three.
    """
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = f"{value:.3f}".rstrip("0").rstrip(".")
    if numerals == ARABIC:
        return to_arabic_digits(text)
    return text


def format_currency(amount: float, currency: str = "EGP", numerals: str = ARABIC) -> str:
    """
    Format a money amount with two decimals and thousands grouping.

    Arabic output uses Arabic-Indic digits, ``٬`` for grouping, a period as
    the decimal point and the local currency sign; Latin output is
    ``"1,234.50 EGP"``.
    """
    text = f"{amount:,.2f}"
    if numerals != ARABIC:
        return f"{text} {currency}"

    text = to_arabic_digits(text.replace(",", ARABIC_THOUSANDS_SEPARATOR))
    return f"{text} {CURRENCY_SIGNS.get(currency, currency)}"
