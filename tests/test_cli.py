"""Tests for the command-line interface."""

import json
import logging

import pytest

from quotepress.cli import create_parser, main


@pytest.fixture(autouse=True)
def restore_package_logger():
    yield
    package_logger = logging.getLogger("quotepress")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class TestCLI:
    """Test suite for the CLI."""

    def test_parser_defaults(self):
        args = create_parser().parse_args(["export", "quote.json"])

        assert args.command == "export"
        assert args.format == "pdf"
        assert args.output is None

    def test_export_default_output(self, document_file):
        assert main(["export", str(document_file), "--format", "csv"]) == 0

        assert (document_file.parent / "Q-2024-007.csv").exists()

    @pytest.mark.parametrize("fmt", ["pdf", "doc", "html", "xlsx"])
    def test_export_formats(self, document_file, temp_dir, fmt):
        output = temp_dir / f"out.{fmt}"

        assert main(["export", str(document_file), "-f", fmt, "-o", str(output)]) == 0
        assert output.stat().st_size > 0

    def test_export_xlsx_with_slashed_id(self, document_record, temp_dir):
        document_record["docId"] = "Q/2024/007"
        source = temp_dir / "slashed.json"
        source.write_text(json.dumps(document_record, ensure_ascii=False), encoding="utf-8")
        output = temp_dir / "out.xlsx"

        assert main(["export", str(source), "-f", "xlsx", "-o", str(output)]) == 0
        assert output.stat().st_size > 0

    def test_export_with_settings(self, document_file, temp_dir):
        settings = temp_dir / "settings.json"
        settings.write_text(json.dumps({"itemsPerPage": 1}), encoding="utf-8")
        output = temp_dir / "out.html"

        assert main(["export", str(document_file), "-f", "html", "-o", str(output), "-s", str(settings)]) == 0
        assert output.read_text(encoding="utf-8").count('<section class="page"') == 2

    def test_paginate_json(self, document_file, capsys):
        assert main(["paginate", str(document_file), "--json"]) == 0

        out = capsys.readouterr().out
        assert '"page_number": 1' in out
        assert '"is_last_page": true' in out

    def test_paginate_table(self, document_file, capsys):
        assert main(["paginate", str(document_file)]) == 0

        assert "1/1" in capsys.readouterr().out

    def test_missing_document(self, temp_dir, capsys):
        assert main(["export", str(temp_dir / "missing.json")]) == 1

        assert "Document file not found" in capsys.readouterr().err

    def test_version(self, capsys):
        assert main(["version"]) == 0

        assert "QuotePress v" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 0
