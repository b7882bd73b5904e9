"""Summary statistics shown before an export runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from career_log_export.services.record_filter import filter_records

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from career_log_export.models.record import CareerRecord, ExportOptions

__all__ = ["ExportStats", "count_matching", "get_export_stats"]


@dataclass(slots=True)
class ExportStats:
    """Overview of a record collection.

    Attributes:
        total_entries: Number of records.
        category_counts: Records per category, in first-seen order.
        date_range: ``(earliest, latest)`` record dates, or None when empty.
        total_skills: Distinct skill names across all records.
        total_projects: Distinct non-empty project names.
    """

    total_entries: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    date_range: tuple[date, date] | None = None
    total_skills: int = 0
    total_projects: int = 0


def get_export_stats(records: Sequence[CareerRecord]) -> ExportStats:
    """Compute :class:`ExportStats` for *records*."""
    if not records:
        return ExportStats()

    category_counts: dict[str, int] = {}
    for record in records:
        key = str(record.category)
        category_counts[key] = category_counts.get(key, 0) + 1

    dates = [r.date for r in records]
    skills = {skill for r in records for skill in r.skills}
    projects = {r.project for r in records if r.project}

    return ExportStats(
        total_entries=len(records),
        category_counts=category_counts,
        date_range=(min(dates), max(dates)),
        total_skills=len(skills),
        total_projects=len(projects),
    )


def count_matching(records: Sequence[CareerRecord], options: ExportOptions) -> int:
    """Return how many records an export with *options* would write."""
    return len(filter_records(records, options))
