"""CSV export for spreadsheet import."""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import ExportBackend
from career_log_export.utils.escaping import escape_csv_field
from career_log_export.utils.presentation import unique_in_order

if TYPE_CHECKING:
    from collections.abc import Sequence

    from career_log_export.formats.base import RenderContext
    from career_log_export.models.record import CareerRecord

__all__ = ["CsvBackend"]

_COLUMNS = ["Date", "Category", "Description", "Impact", "Skills", "Tags", "Project"]
_METADATA_COLUMNS = ["Created At", "Updated At", "ID"]

_LIST_SEPARATOR = "; "


def _row(record: CareerRecord, include_metadata: bool) -> list[str]:
    values = [
        record.date.isoformat(),
        str(record.category),
        record.description,
        record.impact or "",
        _LIST_SEPARATOR.join(unique_in_order(record.skills)),
        _LIST_SEPARATOR.join(unique_in_order(record.tags)),
        record.project or "",
    ]
    if include_metadata:
        values.extend([record.created_at.isoformat(), record.updated_at.isoformat(), record.id])
    return values


class CsvBackend(ExportBackend):
    """One quoted row per record under a fixed header row."""

    format = ExportFormat.CSV

    def render(self, records: Sequence[CareerRecord], context: RenderContext) -> bytes:
        header = _COLUMNS + (_METADATA_COLUMNS if context.include_metadata else [])
        rows = [header] + [_row(r, context.include_metadata) for r in records]
        content = "\n".join(",".join(escape_csv_field(v) for v in row) for row in rows)
        return content.encode("utf-8")
