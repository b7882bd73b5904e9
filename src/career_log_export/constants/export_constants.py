"""Enumerations and fixed literals shared by the export pipeline.

Everything here is plain data: record categories, the closed set of export
formats with their file extension and media type, and the document defaults
used by the PDF and RTF backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RecordCategory(StrEnum):
    """Categories a career-log record can belong to."""

    ACHIEVEMENT = "achievement"
    SKILL = "skill"
    PROJECT = "project"
    LEADERSHIP = "leadership"
    LEARNING = "learning"
    NETWORKING = "networking"


class ExportFormat(StrEnum):
    """Downloadable formats supported by the exporter."""

    CSV = "csv"
    JSON = "json"
    TXT = "txt"
    PDF = "pdf"
    DOCX = "docx"


@dataclass(frozen=True, slots=True)
class FormatInfo:
    """Static description of an export format.

    Attributes:
        label: Name shown to users.
        extension: File extension appended to the resolved filename.
        media_type: Declared media type of the payload.
        description: One-line summary for pickers and ``--help`` output.
    """

    label: str
    extension: str
    media_type: str
    description: str


FORMAT_INFO: dict[ExportFormat, FormatInfo] = {
    ExportFormat.CSV: FormatInfo(
        label="CSV",
        extension="csv",
        media_type="text/csv",
        description="Spreadsheet format for Excel/Google Sheets",
    ),
    ExportFormat.JSON: FormatInfo(
        label="JSON",
        extension="json",
        media_type="application/json",
        description="Structured data format for developers",
    ),
    ExportFormat.TXT: FormatInfo(
        label="Text",
        extension="txt",
        media_type="text/plain;charset=utf-8",
        description="Plain text format for easy reading",
    ),
    ExportFormat.PDF: FormatInfo(
        label="PDF",
        extension="pdf",
        media_type="application/pdf",
        description="Formatted document for sharing",
    ),
    # RTF markup saved under a .docx name so word processors open it directly.
    ExportFormat.DOCX: FormatInfo(
        label="Word",
        extension="docx",
        media_type="application/rtf",
        description="Rich text document for word processors",
    ),
}

DEFAULT_FILENAME_STEM = "career-logs"
SELECTED_FILENAME_PREFIX = "selected-"

REPORT_TITLE = "Career Activity Log Export"
TITLE_RULE = "=" * 50
ENTRY_RULE = "-" * 30
NOT_APPLICABLE = "N/A"
TAG_MARKER = "#"

BULLET_GLYPH = "•"
BULLET_MARKERS = ("•", "-", "*")


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Title/author/subject embedded in PDF and RTF documents."""

    title: str = "Career Activity Log"
    author: str = "Career Log"
    subject: str = "Professional Career Entries Export"


RTF_FONT_NAME = "Times New Roman"
