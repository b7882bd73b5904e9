"""JSON export for developers and re-import."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import ExportBackend

if TYPE_CHECKING:
    from collections.abc import Sequence

    from career_log_export.formats.base import RenderContext
    from career_log_export.models.record import CareerRecord

__all__ = ["JsonBackend"]

_METADATA_FIELDS = {"id", "created_at", "updated_at"}


class JsonBackend(ExportBackend):
    """Envelope with export timestamp, count and the record array.

    Keys are camelCase so files match the web client's own exports and
    load back through :class:`CareerRecord`.
    """

    format = ExportFormat.JSON

    def render(self, records: Sequence[CareerRecord], context: RenderContext) -> bytes:
        exclude = None if context.include_metadata else _METADATA_FIELDS
        export_data = {
            "exportDate": context.now.isoformat(),
            "totalEntries": len(records),
            "entries": [
                r.model_dump(mode="json", by_alias=True, exclude=exclude) for r in records
            ],
        }
        return json.dumps(export_data, indent=2, ensure_ascii=False).encode("utf-8")
