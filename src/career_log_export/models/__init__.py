"""Data models and type definitions"""

from career_log_export.models.export import (
    EmptyResultError,
    ExportError,
    ExportErrorKind,
    ExportFailure,
    ExportOutcome,
    ExportResult,
    RenderFailureError,
    UnsupportedFormatError,
)
from career_log_export.models.record import CareerRecord, DateRange, ExportOptions

__all__ = [
    "CareerRecord",
    "DateRange",
    "EmptyResultError",
    "ExportError",
    "ExportErrorKind",
    "ExportFailure",
    "ExportOptions",
    "ExportOutcome",
    "ExportResult",
    "RenderFailureError",
    "UnsupportedFormatError",
]
