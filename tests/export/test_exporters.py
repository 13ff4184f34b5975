"""Tests for the exporters."""

import csv
import io
import re

import pytest
from openpyxl import load_workbook

from quotepress.exceptions import ExportError
from quotepress.export import (
    CSVExporter,
    HTMLExporter,
    PDFExporter,
    WordExporter,
    XLSXExporter,
    get_exporter,
    supported_formats,
)
from quotepress.models import Document, LineItem

from tests.conftest import make_items


class TestExporterRegistry:
    """Test suite for the format registry."""

    def test_supported_formats(self):
        assert set(supported_formats()) == {"pdf", "doc", "html", "csv", "xlsx"}

    @pytest.mark.parametrize("fmt,cls", [
        ("pdf", PDFExporter), ("doc", WordExporter), ("HTML", HTMLExporter),
        ("csv", CSVExporter), ("xlsx", XLSXExporter),
    ])
    def test_get_exporter(self, fmt, cls):
        assert get_exporter(fmt) is cls

    def test_unknown_format(self):
        with pytest.raises(ExportError):
            get_exporter("odt")


class TestBaseExporterBehaviour:
    """Shared exporter behaviour."""

    def test_missing_output_path(self, sample_document):
        with pytest.raises(ExportError):
            CSVExporter(sample_document).export_to_file()

    def test_output_path_from_constructor(self, sample_document, temp_dir):
        path = CSVExporter(sample_document, output_path=temp_dir / "nested" / "items.csv").export_to_file()

        assert path.exists()

    def test_default_file_name(self, sample_document):
        assert PDFExporter(sample_document).default_file_name() == "Q-2024-001.pdf"
        assert WordExporter(Document()).default_file_name() == "document.doc"

    def test_export_info(self, sample_document):
        info = CSVExporter(sample_document, export_options={"delimiter": ";"}).get_export_info()

        assert info["format"] == "CSV"
        assert info["items"] == 3
        assert info["delimiter"] == ";"


class TestCSVExporter:
    """Test suite for CSVExporter."""

    def test_rows(self, sample_document):
        rows = list(csv.reader(io.StringIO(CSVExporter(sample_document).export_to_string())))

        assert rows[0] == ["البيان", "الوحدة", "الكمية", "السعر", "الإجمالي"]
        assert rows[1] == ["Waterproofing membrane", "m2", "120", "85.5", "10260"]
        assert len(rows) == 4

    def test_quotes_and_newlines(self):
        document = Document(items=(LineItem('Pipe 2", PVC\nschedule 40', "m", 1, 5),))
        rows = list(csv.reader(io.StringIO(CSVExporter(document).export_to_string())))

        assert rows[1][0] == 'Pipe 2", PVC\nschedule 40'

    def test_bom(self, sample_document, temp_dir):
        path = CSVExporter(sample_document).export_to_file(temp_dir / "items.csv")

        assert path.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_without_bom(self, sample_document):
        data = CSVExporter(sample_document, export_options={"include_bom": False}).export_to_bytes()

        assert not data.startswith(b"\xef\xbb\xbf")


class TestXLSXExporter:
    """Test suite for XLSXExporter."""

    def test_workbook(self, sample_document, temp_dir):
        path = XLSXExporter(sample_document).export_to_file(temp_dir / "items.xlsx")
        ws = load_workbook(path).active

        assert ws.title == "Q-2024-001"
        assert ws.sheet_view.rightToLeft
        assert [cell.value for cell in ws[1]] == ["م", "البيان", "الوحدة", "الكمية", "السعر", "الإجمالي"]
        assert ws.cell(row=2, column=1).value == 1
        assert ws.cell(row=2, column=6).value == pytest.approx(10260)

    def test_totals_rows(self, sample_document):
        wb = XLSXExporter(sample_document).build_workbook()
        ws = wb.active
        totals = sample_document.totals()

        # Three items, one blank row, then subtotal/tax/total
        assert ws.cell(row=6, column=5).value == "المجموع"
        assert ws.cell(row=6, column=6).value == pytest.approx(totals.sub_total)
        assert ws.cell(row=7, column=5).value == "الضريبة (14%)"
        assert ws.cell(row=8, column=6).value == pytest.approx(totals.total)

    def test_without_totals(self, sample_document):
        ws = XLSXExporter(sample_document, export_options={"include_totals": False}).build_workbook().active

        assert ws.max_row == 4

    def test_sheet_title_drops_forbidden_characters(self, temp_dir):
        document = Document(items=tuple(make_items(2)), doc_id="Q/2024/001")
        path = XLSXExporter(document).export_to_file(temp_dir / "items.xlsx")

        assert load_workbook(path).active.title == "Q-2024-001"

    def test_sheet_title_is_truncated(self):
        exporter = XLSXExporter(Document(), export_options={"sheet_name": "[" + "x" * 40 + "]"})
        title = exporter.build_workbook().active.title

        assert len(title) == 31
        assert title.startswith("-xxx")

    def test_unwritable_cell_raises_export_error(self):
        document = Document(items=(LineItem("bad\x01text", "m", 1, 1),))

        with pytest.raises(ExportError):
            XLSXExporter(document).export_to_bytes()


class TestDocumentExporters:
    """Test suite for the paginated HTML, Word and PDF exporters."""

    def test_word_export(self, latin_settings, temp_dir):
        document = Document(items=tuple(make_items(20)), doc_id="E-2024-003")
        path = WordExporter(document, latin_settings).export_to_file(temp_dir / "doc.doc")
        data = path.read_bytes()

        assert data.startswith(b"\xef\xbb\xbf")
        text = data.decode("utf-8-sig")
        assert "urn:schemas-microsoft-com:office:word" in text
        assert "<w:View>Print</w:View>" in text
        assert len(re.findall(r'<section class="page"', text)) == 2

    def test_word_and_html_share_pages(self, latin_settings):
        document = Document(items=tuple(make_items(35, long=True)))
        word = WordExporter(document, latin_settings).export_to_string()
        html_text = HTMLExporter(document, latin_settings).export_to_string()

        word_pages = re.findall(r'data-page="(\d+)"', word)
        html_pages = re.findall(r'data-page="(\d+)"', html_text)
        assert word_pages == html_pages == ["1", "2", "3", "4", "5"]

    def test_pdf_export(self, sample_document, latin_settings, temp_dir):
        path = PDFExporter(sample_document, latin_settings).export_to_file(temp_dir / "q.pdf")

        assert path.read_bytes().startswith(b"%PDF")

    def test_html_export(self, sample_document, temp_dir):
        path = HTMLExporter(sample_document).export_to_file(temp_dir / "q.html")

        assert "<!DOCTYPE html>" in path.read_text(encoding="utf-8")
