"""Tests for the export coordinator."""

from __future__ import annotations

import json
import logging
from datetime import UTC, date, datetime
from unittest.mock import patch

import pytest

from career_log_export.constants import DocumentMetadata
from career_log_export.formats.pdf_format import PdfBackend
from career_log_export.models import (
    CareerRecord,
    ExportErrorKind,
    ExportFailure,
    ExportOptions,
    ExportResult,
)
from career_log_export.services.exporter import export_document, export_records

NOW = datetime(2024, 3, 15, 9, 30, tzinfo=UTC)


class TestExportRecords:
    """Tests for export_records."""

    def test_csv_result(self, sample_records: list[CareerRecord]) -> None:
        result = export_records(sample_records, ExportOptions(format="csv"), now=NOW)
        assert isinstance(result, ExportResult)
        assert result.ok
        assert result.filename == "career-logs-2024-03-15.csv"
        assert result.media_type == "text/csv"
        assert result.record_count == 3
        assert result.payload.decode("utf-8").count("\n") == 3

    def test_filters_before_render(self, sample_records: list[CareerRecord]) -> None:
        options = ExportOptions(format="json", categories=["achievement"])
        result = export_records(sample_records, options, now=NOW)
        data = json.loads(result.payload)
        assert result.record_count == 1
        assert [e["id"] for e in data["entries"]] == ["b"]

    def test_selected_filename_prefix(self, sample_records: list[CareerRecord]) -> None:
        options = ExportOptions(format="txt", selected_only=True, selected_ids={"a"})
        result = export_records(sample_records, options, now=NOW)
        assert result.filename == "selected-career-logs-2024-03-15.txt"
        assert result.media_type.startswith("text/plain")

    def test_explicit_filename(self, sample_records: list[CareerRecord]) -> None:
        options = ExportOptions(format="json", filename="mine.json")
        assert export_records(sample_records, options, now=NOW).filename == "mine.json"

    def test_blank_filename_uses_default(self, sample_records: list[CareerRecord]) -> None:
        options = ExportOptions(format="json", filename="   ")
        result = export_records(sample_records, options, now=NOW)
        assert result.filename == "career-logs-2024-03-15.json"

    def test_pdf_export(self, sample_records: list[CareerRecord]) -> None:
        result = export_records(sample_records, ExportOptions(format="pdf"), now=NOW)
        assert isinstance(result, ExportResult)
        assert result.payload.startswith(b"%PDF")
        assert result.media_type == "application/pdf"

    def test_docx_export_is_rtf(self, sample_records: list[CareerRecord]) -> None:
        metadata = DocumentMetadata(title="Mine")
        result = export_records(
            sample_records, ExportOptions(format="docx"), metadata=metadata, now=NOW
        )
        assert result.filename.endswith(".docx")
        assert result.media_type == "application/rtf"
        assert result.payload.startswith(b"{\\rtf1")
        assert b"\\title Mine" in result.payload

    def test_empty_result(self, sample_records: list[CareerRecord]) -> None:
        options = ExportOptions(date_range={"start": date(2030, 1, 1)})
        outcome = export_records(sample_records, options, now=NOW)
        assert isinstance(outcome, ExportFailure)
        assert not outcome.ok
        assert outcome.kind is ExportErrorKind.EMPTY_RESULT
        assert outcome.message == "No entries match the export criteria"

    def test_empty_collection(self) -> None:
        outcome = export_records([], ExportOptions(format="pdf"), now=NOW)
        assert outcome.kind is ExportErrorKind.EMPTY_RESULT

    def test_unsupported_format(self, sample_records: list[CareerRecord]) -> None:
        outcome = export_records(sample_records, ExportOptions(format="xlsx"), now=NOW)
        assert isinstance(outcome, ExportFailure)
        assert outcome.kind is ExportErrorKind.UNSUPPORTED_FORMAT
        assert "xlsx" in outcome.message

    def test_unsupported_format_checked_before_filter(self) -> None:
        outcome = export_records([], ExportOptions(format="xlsx"), now=NOW)
        assert outcome.kind is ExportErrorKind.UNSUPPORTED_FORMAT

    def test_render_failure(
        self, sample_records: list[CareerRecord], caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch.object(PdfBackend, "render_stream", side_effect=RuntimeError("font missing")),
            caplog.at_level(logging.ERROR),
        ):
            outcome = export_records(sample_records, ExportOptions(format="pdf"), now=NOW)
        assert isinstance(outcome, ExportFailure)
        assert outcome.kind is ExportErrorKind.RENDER_FAILURE
        assert "text format" in outcome.message
        assert outcome.cause == "RuntimeError: font missing"
        assert "Export failed" in caplog.text

    def test_plain_format_errors_propagate(self, sample_records: list[CareerRecord]) -> None:
        with (
            patch(
                "career_log_export.formats.csv_format.escape_csv_field",
                side_effect=ValueError("boom"),
            ),
            pytest.raises(ValueError, match="boom"),
        ):
            export_records(sample_records, ExportOptions(format="csv"), now=NOW)

    def test_does_not_reorder_input(self, sample_records: list[CareerRecord]) -> None:
        before = [r.id for r in sample_records]
        export_records(sample_records, ExportOptions(), now=NOW)
        assert [r.id for r in sample_records] == before


class TestExportDocument:
    """Tests for export_document."""

    def test_text_document(self) -> None:
        options = ExportOptions(format="txt", filename="notes")
        result = export_document("Summary:\n- one\n- two", options, now=NOW)
        assert isinstance(result, ExportResult)
        assert result.filename == "notes.txt"
        assert result.record_count == 0
        assert result.payload.decode("utf-8") == "Summary:\n• one\n• two\n"

    def test_pdf_document(self) -> None:
        result = export_document("Summary:\nSome text", ExportOptions(format="pdf"), now=NOW)
        assert result.payload.startswith(b"%PDF")

    def test_docx_document(self) -> None:
        result = export_document("Intro:\nBody", ExportOptions(format="docx"), now=NOW)
        assert b"\\b\\fs26 Intro:\\b0" in result.payload

    def test_csv_not_a_document_format(self) -> None:
        outcome = export_document("text", ExportOptions(format="csv"), now=NOW)
        assert outcome.kind is ExportErrorKind.UNSUPPORTED_FORMAT
        assert "txt, pdf, docx" in outcome.message

    def test_blank_content(self) -> None:
        outcome = export_document("  \n\n", ExportOptions(format="txt"), now=NOW)
        assert outcome.kind is ExportErrorKind.EMPTY_RESULT
