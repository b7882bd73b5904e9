"""Filename helpers for export downloads."""

from __future__ import annotations

import re
from datetime import date

from career_log_export.constants.export_constants import (
    DEFAULT_FILENAME_STEM,
    SELECTED_FILENAME_PREFIX,
)

__all__ = ["default_filename_stem", "resolve_filename", "sanitize_filename"]


def sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    # Replace invalid characters with underscores
    sanitized = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", name)
    # Remove leading/trailing whitespace and dots
    sanitized = sanitized.strip(". ")
    return sanitized or DEFAULT_FILENAME_STEM


def default_filename_stem(today: date, *, selected: bool = False) -> str:
    """Return ``[selected-]career-logs-YYYY-MM-DD``."""
    prefix = SELECTED_FILENAME_PREFIX if selected else ""
    return f"{prefix}{DEFAULT_FILENAME_STEM}-{today.isoformat()}"


def resolve_filename(
    explicit: str | None,
    extension: str,
    today: date,
    *,
    selected: bool = False,
) -> str:
    """Build the download filename, extension included.

    An explicit name wins over the generated default. A trailing extension
    that already matches *extension* is not repeated.

    Args:
        explicit: Filename supplied by the user, if any.
        extension: Extension of the export format, without the dot.
        today: Date used in the generated default.
        selected: Whether the selection filter is active.

    Returns:
        Filename string such as ``career-logs-2024-03-01.csv``.
    """
    if explicit:
        stem = sanitize_filename(explicit)
        suffix = f".{extension}"
        if stem.lower().endswith(suffix):
            stem = sanitize_filename(stem[: -len(suffix)])
    else:
        stem = default_filename_stem(today, selected=selected)
    return f"{stem}.{extension}"
