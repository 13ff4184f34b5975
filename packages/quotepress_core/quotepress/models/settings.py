"""
Application settings: branding, defaults and paging capacity.

Settings are read once per render and passed explicitly to the paginator
and renderers; nothing reaches into global state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..exceptions import ConfigurationError
from ..layout.paging_policy import DEFAULT_ITEMS_PER_PAGE, PagingPolicy
from ..utils.numerals import NUMERAL_SYSTEMS

logger = logging.getLogger(__name__)

MAX_ITEMS_PER_PAGE = 17

DEFAULT_FOOTER_TEXT = "Company Name\nAddress\nPhone & Email"
DEFAULT_TERMS = "الأسعار شاملة الضريبة\nصالحة لمدة 30 يوم\nالتسليم خلال 15 يوم عمل"

# Stored settings use camelCase keys
_RECORD_KEYS = {
    "headerImageUrl": "header_image",
    "footerText": "footer_text",
    "defaultTerms": "default_terms",
    "defaultPaymentMethod": "default_payment_method",
    "itemsPerPage": "items_per_page",
    "continuationItemsPerPage": "continuation_items_per_page",
    "showIndexColumn": "show_index_column",
    "showUnitColumn": "show_unit_column",
    "showQuantityColumn": "show_quantity_column",
    "showPriceColumn": "show_price_column",
    "showTotalColumn": "show_total_column",
    "numerals": "numerals",
    "currency": "currency",
    "fontPath": "font_path",
}


def clamp_items_per_page(value: Any, maximum: int = MAX_ITEMS_PER_PAGE) -> int:
    """Clamp a stored items-per-page value into ``[1, maximum]``."""
    if value in (None, ""):
        return DEFAULT_ITEMS_PER_PAGE
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("itemsPerPage must be a number", repr(value)) from e
    return min(max(1, number), maximum)


@dataclass
class Settings:
    """Branding, document defaults, column visibility and page capacity."""

    header_image: str = ""
    footer_text: str = DEFAULT_FOOTER_TEXT
    default_terms: str = DEFAULT_TERMS
    default_payment_method: str = ""
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    continuation_items_per_page: Optional[int] = None
    show_index_column: bool = True
    show_unit_column: bool = True
    show_quantity_column: bool = True
    show_price_column: bool = True
    show_total_column: bool = True
    numerals: str = "arabic"
    currency: str = "EGP"
    font_path: str = ""

    def __post_init__(self):
        self.items_per_page = clamp_items_per_page(self.items_per_page)
        if self.continuation_items_per_page is not None:
            try:
                self.continuation_items_per_page = max(1, int(self.continuation_items_per_page))
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    "continuationItemsPerPage must be a number", repr(self.continuation_items_per_page)
                ) from e
        if self.numerals not in NUMERAL_SYSTEMS:
            raise ConfigurationError("Unknown numeral system", repr(self.numerals))

    def paging_policy(self) -> PagingPolicy:
        """Build the paging policy for one pagination run."""
        return PagingPolicy(
            base_items_per_page=self.items_per_page,
            continuation_items_per_page=self.continuation_items_per_page,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build settings from a stored record, filling defaults for missing keys.

        Both camelCase record keys and snake_case field names are accepted;
        unknown keys are ignored.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Settings must be a mapping", type(data).__name__)

        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _RECORD_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            if name.startswith("show_"):
                if not isinstance(value, bool):
                    raise ConfigurationError(f"{key} must be true or false", repr(value))
            elif name in ("header_image", "footer_text", "default_terms",
                          "default_payment_method", "numerals", "currency", "font_path"):
                if not isinstance(value, str):
                    raise ConfigurationError(f"{key} must be a string", repr(value))
            values[name] = value

        settings = cls(**values)
        logger.debug(f"Settings loaded: items_per_page={settings.items_per_page}, numerals={settings.numerals}")
        return settings

    def to_dict(self) -> Dict[str, Any]:
        reverse = {name: key for key, name in _RECORD_KEYS.items()}
        return {reverse[f.name]: getattr(self, f.name) for f in fields(self)}
