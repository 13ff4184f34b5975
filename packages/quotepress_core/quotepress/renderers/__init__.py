"""
Renderers: draw paginated documents as HTML or PDF.
"""

from .base_renderer import BaseRenderer, Column
from .html_renderer import HTMLRenderer
from .pdf_renderer import PDFRenderer

__all__ = [
    "BaseRenderer",
    "Column",
    "HTMLRenderer",
    "PDFRenderer",
]
