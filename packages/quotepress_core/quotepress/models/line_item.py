"""
Line item model.

One billable row of a quote or estimation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..exceptions import DocumentError


def _to_number(value: Any, field_name: str) -> float:
    """Coerce a record value to float; empty values count as zero."""
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise DocumentError(f"Invalid {field_name}", repr(value))
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise DocumentError(f"Invalid {field_name}", repr(value)) from e


@dataclass(frozen=True, slots=True)
class LineItem:
    """One billable row: description, unit, quantity and unit price."""

    description: str = ""
    unit: str = ""
    quantity: float = 0.0
    unit_price: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.quantity):
            raise DocumentError("Quantity must be a finite number", repr(self.quantity))
        if not math.isfinite(self.unit_price):
            raise DocumentError("Unit price must be a finite number", repr(self.unit_price))
        if self.quantity < 0:
            raise DocumentError("Quantity must be non-negative", repr(self.quantity))
        if self.unit_price < 0:
            raise DocumentError("Unit price must be non-negative", repr(self.unit_price))

    @property
    def line_total(self) -> float:
        """Quantity multiplied by unit price."""
        return self.quantity * self.unit_price

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        """
        Build a line item from a stored record.

        Accepts both ``price`` (stored records) and ``unit_price`` keys.
        Missing numbers are treated as zero and missing text as empty.
        """
        if not isinstance(data, Mapping):
            raise DocumentError("Line item must be a mapping", type(data).__name__)

        price = data.get("price", data.get("unit_price"))
        return cls(
            description=str(data.get("description") or ""),
            unit=str(data.get("unit") or ""),
            quantity=_to_number(data.get("quantity"), "quantity"),
            unit_price=_to_number(price, "price"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "unit": self.unit,
            "quantity": self.quantity,
            "price": self.unit_price,
        }
