"""
Document model for quotes and estimations.

A document is the unit of work handed to the paginator and renderers:
metadata, an ordered sequence of line items and the derived totals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import DocumentError
from .line_item import LineItem

logger = logging.getLogger(__name__)

TAX_RATE = 0.14


class DocumentType(Enum):
    """Document types."""
    QUOTE = "quote"
    ESTIMATION = "estimation"

    @property
    def title(self) -> str:
        """Printed document title."""
        return "عرض سعر" if self is DocumentType.QUOTE else "مقايسة"

    @property
    def id_prefix(self) -> str:
        return "Q" if self is DocumentType.QUOTE else "E"

    @property
    def description_caption(self) -> str:
        return "البيان" if self is DocumentType.QUOTE else "البند"

    @property
    def quantity_caption(self) -> str:
        return "العدد" if self is DocumentType.QUOTE else "الكمية"

    @classmethod
    def parse(cls, value: Any) -> "DocumentType":
        if isinstance(value, cls):
            return value
        if value in (None, ""):
            return cls.QUOTE
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise DocumentError("Unknown document type", repr(value)) from e


@dataclass(frozen=True, slots=True)
class Totals:
    """Financial summary printed on the last page."""
    sub_total: float
    tax_amount: float
    total: float
    tax_rate: float = TAX_RATE


def make_doc_id(doc_type: DocumentType, sequence: int, year: Optional[int] = None) -> str:
    """
    Build a user-facing document id such as ``Q-2024-001``.

    Args:
        doc_type: Document type (selects the prefix)
        sequence: Per-type counter value, starting at 1
        year: Year component (defaults to the current year)

    Returns:
        Document id string
    """
    if sequence < 1:
        raise DocumentError("Document sequence must start at 1", repr(sequence))
    if year is None:
        year = datetime.now().year
    return f"{doc_type.id_prefix}-{year}-{sequence:03d}"


def _parse_created_at(value: Any) -> datetime:
    if value in (None, ""):
        return datetime.now()
    if isinstance(value, datetime):
        return value
    text = str(value)
    # Stored records use JavaScript ISO strings with a trailing "Z"
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise DocumentError("Invalid createdAt timestamp", text) from e


@dataclass(frozen=True, slots=True)
class Document:
    """
    One quote or estimation record.

    Items keep their print order; that order is also the numbering order.
    Terms and payment method are only printed for quotes.
    """

    doc_type: DocumentType = DocumentType.QUOTE
    client_name: str = ""
    subject: str = ""
    items: Tuple[LineItem, ...] = ()
    terms: str = ""
    payment_method: str = ""
    doc_id: str = ""
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        # Accept any iterable of items but store an immutable tuple
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def is_quote(self) -> bool:
        return self.doc_type is DocumentType.QUOTE

    @property
    def sub_total(self) -> float:
        return sum(item.line_total for item in self.items)

    @property
    def tax_amount(self) -> float:
        return self.sub_total * TAX_RATE

    @property
    def total(self) -> float:
        return self.sub_total + self.tax_amount

    def totals(self) -> Totals:
        """Compute subtotal, tax and grand total once."""
        sub_total = self.sub_total
        tax_amount = sub_total * TAX_RATE
        return Totals(sub_total=sub_total, tax_amount=tax_amount, total=sub_total + tax_amount)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """
        Build a document from a stored record.

        Record keys follow the stored JSON shape (``docType``, ``clientName``,
        ``paymentMethod``, ``docId``, ``createdAt``). Stored totals are ignored
        and recomputed from the items.
        """
        if not isinstance(data, Mapping):
            raise DocumentError("Document record must be a mapping", type(data).__name__)

        raw_items = data.get("items") or []
        if not isinstance(raw_items, (list, tuple)):
            raise DocumentError("Document items must be a list", type(raw_items).__name__)

        document = cls(
            doc_type=DocumentType.parse(data.get("docType")),
            client_name=str(data.get("clientName") or ""),
            subject=str(data.get("subject") or ""),
            items=tuple(LineItem.from_dict(item) for item in raw_items),
            terms=str(data.get("terms") or ""),
            payment_method=str(data.get("paymentMethod") or ""),
            doc_id=str(data.get("docId") or ""),
            created_at=_parse_created_at(data.get("createdAt")),
        )
        logger.debug(f"Loaded document {document.doc_id or '<draft>'} with {len(document.items)} items")
        return document

    def to_dict(self) -> Dict[str, Any]:
        totals = self.totals()
        return {
            "docId": self.doc_id,
            "docType": self.doc_type.value,
            "clientName": self.client_name,
            "subject": self.subject,
            "items": [item.to_dict() for item in self.items],
            "terms": self.terms,
            "paymentMethod": self.payment_method,
            "createdAt": self.created_at.isoformat(),
            "subTotal": totals.sub_total,
            "taxAmount": totals.tax_amount,
            "total": totals.total,
        }
