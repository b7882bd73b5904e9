"""Record selection for exports.

Applies the date-range, category and selection predicates from
:class:`ExportOptions` and orders the survivors newest first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from career_log_export.models.record import CareerRecord, ExportOptions

__all__ = ["filter_records", "is_selection_active"]


def is_selection_active(options: ExportOptions) -> bool:
    """Return True when only selected records should be exported.

    A ``selected_only`` flag with an empty selection restricts nothing.
    """
    return options.selected_only and bool(options.selected_ids)


def _matches(record: CareerRecord, options: ExportOptions, selection_active: bool) -> bool:
    if options.date_range is not None and not options.date_range.contains(record.date):
        return False
    if options.categories and record.category not in options.categories:
        return False
    if selection_active and record.id not in options.selected_ids:
        return False
    return True


def filter_records(records: Iterable[CareerRecord], options: ExportOptions) -> list[CareerRecord]:
    """Return the records matching every predicate in *options*.

    Args:
        records: Records to filter. Dates are assumed valid.
        options: Export options carrying the predicates.

    Returns:
        New list sorted by date descending. ``sorted`` is stable, so records
        sharing a date keep their input order.
    """
    selection_active = is_selection_active(options)
    matched = [r for r in records if _matches(r, options, selection_active)]
    return sorted(matched, key=lambda r: r.date, reverse=True)
