"""Custom exceptions for QuotePress."""

from typing import Optional


class QuotePressError(Exception):
    """Base exception for QuotePress errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DocumentError(QuotePressError):
    """Exception raised for invalid document records or line items."""

    pass


class ConfigurationError(QuotePressError):
    """Exception raised for invalid settings or configuration files."""

    pass


class RenderingError(QuotePressError):
    """Exception raised while drawing pages."""

    pass


class ExportError(QuotePressError):
    """Exception raised during document export."""

    pass
