"""
Pytest configuration for QuotePress
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import pytest

from quotepress import Document, DocumentType, LineItem, Settings

LONG_TEXT = (
    "توريد وتركيب أعمال العزل المائي للأسطح باستخدام رولات البيتومين المعدل "
    "بسماكة 4 مم مع طبقة حماية من الخرسانة الخفيفة وعمل الميول اللازمة لتصريف "
    "مياه الأمطار طبقا للمواصفات الفنية وأصول الصناعة وتعليمات المهندس المشرف"
)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for exported files."""
    return Path(tmp_path)


def make_items(count, description="Item", long=False):
    """Build ``count`` line items; long items get descriptions over 200 characters."""
    text = LONG_TEXT if long else description
    return [
        LineItem(description=f"{text} {i + 1}", unit="m2", quantity=i + 1, unit_price=10.0)
        for i in range(count)
    ]


@pytest.fixture
def short_items():
    return make_items(20)


@pytest.fixture
def long_items():
    return make_items(10, long=True)


@pytest.fixture
def sample_document():
    """Quote with three items and terms."""
    return Document(
        doc_type=DocumentType.QUOTE,
        client_name="Acme Contracting",
        subject="Roof insulation",
        items=(
            LineItem("Waterproofing membrane", "m2", 120, 85.5),
            LineItem("Thermal insulation boards", "m2", 120, 60),
            LineItem("Site supervision", "day", 3, 1500),
        ),
        terms="Valid for 30 days",
        payment_method="Bank transfer",
        doc_id="Q-2024-001",
        created_at=datetime(2024, 5, 14, 10, 30),
    )


@pytest.fixture
def latin_settings():
    """Settings with Latin numerals and no header image."""
    return Settings(footer_text="Acme Contracting\nCairo", numerals="latin", items_per_page=17)


@pytest.fixture
def document_record():
    """Stored JSON record of a quote."""
    return {
        "docId": "Q-2024-007",
        "docType": "quote",
        "clientName": "شركة النور",
        "subject": "أعمال دهانات",
        "items": [
            {"description": "دهان بلاستيك", "unit": "م2", "quantity": 250, "price": 45},
            {"description": "معجون", "unit": "م2", "quantity": 250, "price": 20},
        ],
        "terms": "الأسعار شاملة الضريبة",
        "paymentMethod": "نقدا",
        "createdAt": "2024-05-14T10:30:00.000Z",
        "subTotal": 16250,
        "taxAmount": 2275,
        "total": 18525,
    }


@pytest.fixture
def document_file(temp_dir, document_record):
    path = temp_dir / "quote.json"
    path.write_text(json.dumps(document_record, ensure_ascii=False), encoding="utf-8")
    return path
