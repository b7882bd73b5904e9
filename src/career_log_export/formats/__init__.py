"""Format registry for record exports."""

from __future__ import annotations

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import DocumentBackend, ExportBackend, RenderContext
from career_log_export.formats.csv_format import CsvBackend
from career_log_export.formats.docx_format import DocxBackend
from career_log_export.formats.json_format import JsonBackend
from career_log_export.formats.pdf_format import PdfBackend
from career_log_export.formats.text_format import TextBackend
from career_log_export.models.export import UnsupportedFormatError

__all__ = [
    "DocumentBackend",
    "ExportBackend",
    "RenderContext",
    "get_backend",
    "list_document_formats",
    "list_formats",
]

_REGISTRY: dict[ExportFormat, ExportBackend] = {
    ExportFormat.CSV: CsvBackend(),
    ExportFormat.JSON: JsonBackend(),
    ExportFormat.TXT: TextBackend(),
    ExportFormat.PDF: PdfBackend(),
    ExportFormat.DOCX: DocxBackend(),
}


def get_backend(name: str) -> ExportBackend:
    """Return the backend registered under *name*.

    Raises:
        UnsupportedFormatError: If no format with that name exists.
    """
    try:
        return _REGISTRY[ExportFormat(name.strip().lower())]
    except (KeyError, ValueError):
        available = ", ".join(list_formats())
        msg = f"Unsupported export format {name!r}. Available: {available}"
        raise UnsupportedFormatError(msg) from None


def list_formats() -> list[str]:
    """Return the names of all registered formats in menu order."""
    return [str(fmt) for fmt in _REGISTRY]


def list_document_formats() -> list[str]:
    """Return the formats that can render free-text documents."""
    return [str(fmt) for fmt, backend in _REGISTRY.items() if isinstance(backend, DocumentBackend)]
