"""Utility functions and helpers"""

from career_log_export.utils.dates import format_display_date, format_display_datetime
from career_log_export.utils.escaping import encode_rtf_unicode, escape_csv_field, escape_rtf
from career_log_export.utils.filenames import (
    default_filename_stem,
    resolve_filename,
    sanitize_filename,
)
from career_log_export.utils.presentation import (
    collapse_whitespace,
    display_category,
    unique_in_order,
)

__all__ = [
    "collapse_whitespace",
    "default_filename_stem",
    "encode_rtf_unicode",
    "display_category",
    "escape_csv_field",
    "escape_rtf",
    "format_display_date",
    "format_display_datetime",
    "resolve_filename",
    "sanitize_filename",
    "unique_in_order",
]
