"""Tests for numeral localization."""

import logging

import pytest

from quotepress.utils import (
    format_currency,
    format_number,
    format_text_with_arabic_numerals,
    localize_text,
    setup_logging,
    to_arabic_digits,
)


class TestDigits:
    """Test suite for digit conversion."""

    def test_to_arabic_digits(self):
        assert to_arabic_digits("Q-2024-015") == "Q-٢٠٢٤-٠١٥"

    def test_non_string(self):
        assert to_arabic_digits(12) == ""
        assert format_text_with_arabic_numerals(None) == ""


class TestTextWithNumerals:
    """Test suite for spacing around numbers."""

    @pytest.mark.parametrize("text,expected", [
        ("قيمة14%شامل", "قيمة ١٤% شامل"),
        ("الضريبة 14% شاملة", "الضريبة ١٤% شاملة"),
        ("صالحة لمدة 30 يوم", "صالحة لمدة ٣٠ يوم"),
        ("بسماكة4مم", "بسماكة ٤ مم"),
        ("1250", "١٢٥٠"),
        ("12.5", "١٢.٥"),
        ("من 3-4 أيام", "من ٣-٤ أيام"),
        ("بدون أرقام", "بدون أرقام"),
    ])
    def test_spacing(self, text, expected):
        assert format_text_with_arabic_numerals(text) == expected

    def test_keeps_line_breaks(self):
        assert format_text_with_arabic_numerals("سطر 1\nسطر 2") == "سطر ١\nسطر ٢"

    def test_localize_text_latin_passthrough(self):
        assert localize_text("Valid 30days", "latin") == "Valid 30days"
        assert localize_text("Valid 30days", "arabic") == "Valid ٣٠ days"


class TestNumberFormatting:
    """Test suite for numbers and currency."""

    def test_format_number(self):
        assert format_number(12, "latin") == "12"
        assert format_number(2.5, "latin") == "2.5"
        assert format_number(1.125, "latin") == "1.125"
        assert format_number(120.0, "arabic") == "١٢٠"

    def test_format_currency_latin(self):
        assert format_currency(1234.5, "EGP", "latin") == "1,234.50 EGP"

    def test_format_currency_arabic(self):
        assert format_currency(1234.5) == "١٬٢٣٤.٥٠ ج.م."

    def test_format_currency_unknown_sign(self):
        assert format_currency(3, "USD") == "٣.٠٠ USD"

    def test_format_currency_zero(self):
        assert format_currency(0, "EGP", "latin") == "0.00 EGP"


class TestLogging:
    """Test suite for logging setup."""

    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        package_logger = logging.getLogger("quotepress")
        yield
        package_logger.handlers.clear()
        package_logger.propagate = True
        package_logger.setLevel(logging.NOTSET)

    def test_setup_logging_level(self):
        package_logger = setup_logging("DEBUG", use_rich=False)

        assert package_logger.name == "quotepress"
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_setup_logging_env_default(self, monkeypatch):
        monkeypatch.setenv("QUOTEPRESS_LOG_LEVEL", "error")
        package_logger = setup_logging()

        assert package_logger.level == logging.ERROR
