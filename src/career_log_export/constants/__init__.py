from __future__ import annotations

from career_log_export.constants.export_constants import (
    BULLET_GLYPH,
    BULLET_MARKERS,
    FORMAT_INFO,
    DocumentMetadata,
    ExportFormat,
    FormatInfo,
    RecordCategory,
)

__all__ = [
    "BULLET_GLYPH",
    "BULLET_MARKERS",
    "DocumentMetadata",
    "ExportFormat",
    "FORMAT_INFO",
    "FormatInfo",
    "RecordCategory",
]
