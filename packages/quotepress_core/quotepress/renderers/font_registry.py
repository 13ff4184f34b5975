"""
Font lookup and registration for the PDF renderer.

The standard Type 1 fonts carry no Arabic glyphs, so captions, labels and
Arabic-Indic digits need a TrueType font with Arabic coverage. Fonts are
registered with ReportLab under a name derived from their file path, so two
renderers with different font files never share a registration.
"""

from __future__ import annotations

import hashlib
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..exceptions import RenderingError

logger = logging.getLogger(__name__)

SEARCH_DIRECTORIES: List[Path] = [
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".fonts",
    Path.home() / ".local/share/fonts",
    # Windows fonts
    Path("C:/Windows/Fonts"),
    # macOS fonts
    Path("/System/Library/Fonts"),
    Path("/Library/Fonts"),
]

# Families with Arabic coverage, in order of preference
UNICODE_FONT_FAMILIES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "DejaVuSans": {
        "": ("DejaVuSans.ttf",),
        "-Bold": ("DejaVuSans-Bold.ttf",),
    },
    "NotoNaskhArabic": {
        "": ("NotoNaskhArabic-Regular.ttf",),
        "-Bold": ("NotoNaskhArabic-Bold.ttf",),
    },
    "NotoSansArabic": {
        "": ("NotoSansArabic-Regular.ttf",),
        "-Bold": ("NotoSansArabic-Bold.ttf",),
    },
    "Amiri": {
        "": ("Amiri-Regular.ttf",),
        "-Bold": ("Amiri-Bold.ttf",),
    },
    "FreeSerif": {
        "": ("FreeSerif.ttf",),
        "-Bold": ("FreeSerifBold.ttf",),
    },
    "Arial": {
        "": ("arial.ttf",),
        "-Bold": ("arialbd.ttf", "Arial Bold.ttf"),
    },
}

FALLBACK_FONTS = ("Helvetica", "Helvetica-Bold")


@lru_cache()
def _build_font_index() -> Dict[str, Path]:
    index: Dict[str, Path] = {}
    for root in SEARCH_DIRECTORIES:
        if not root.exists():
            continue
        try:
            for candidate in root.rglob("*.ttf"):
                index.setdefault(candidate.name.lower(), candidate)
        except OSError as exc:
            logger.debug("Could not scan font directory %s: %s", root, exc)
    return index


def _locate_font_file(candidates: Iterable[str]) -> Optional[Path]:
    index = _build_font_index()
    for name in candidates:
        path = index.get(name.lower())
        if path:
            return path
    return None


def find_unicode_font() -> Optional[Tuple[Path, Path]]:
    """
    Find an installed TrueType font that covers Arabic.

    Returns:
        ``(regular, bold)`` file paths; bold is the regular file when the
        family has no bold variant installed. None when nothing is found.
    """
    for family, variants in UNICODE_FONT_FAMILIES.items():
        regular = _locate_font_file(variants[""])
        if regular is None:
            continue
        bold = _locate_font_file(variants["-Bold"]) or regular
        logger.debug("Using %s font family (%s)", family, regular)
        return regular, bold
    return None


def registered_font_name(font_path: Union[str, Path]) -> str:
    """ReportLab font name for a font file: its stem plus a digest of the path."""
    path = Path(font_path).expanduser().resolve()
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:8]
    return f"{path.stem}-{digest}"


def register_font(font_path: Union[str, Path]) -> str:
    """Register a TrueType font file once and return its ReportLab name."""
    font_name = registered_font_name(font_path)
    if font_name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        logger.debug("Registered font %s (%s)", font_name, font_path)
    return font_name


def resolve_fonts(font_path: Optional[Union[str, Path]] = None) -> Tuple[str, str]:
    """
    Pick the regular and bold font names for a PDF.

    A configured ``font_path`` is used for both weights and must load.
    Without one, an installed Unicode font is used; Helvetica is the last
    resort and cannot draw Arabic text.

    Raises:
        RenderingError: If the configured font cannot be loaded
    """
    if font_path:
        try:
            font_name = register_font(font_path)
        except Exception as e:
            raise RenderingError("Failed to load font", f"{font_path}: {e}") from e
        return font_name, font_name

    located = find_unicode_font()
    if located is None:
        logger.warning("No Unicode TrueType font found; Arabic text will not render in PDF. "
                       "Set fontPath in the settings file.")
        return FALLBACK_FONTS

    regular, bold = located
    try:
        return register_font(regular), register_font(bold)
    except Exception as e:
        logger.warning(f"Failed to register font {regular}: {e}; falling back to Helvetica")
        return FALLBACK_FONTS
