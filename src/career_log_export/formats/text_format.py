"""Plain-text report export."""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import DocumentBackend
from career_log_export.services.narrative import render_flat, stream_to_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from career_log_export.formats.base import RenderContext
    from career_log_export.models.record import CareerRecord
    from career_log_export.services.narrative import ContentStream

__all__ = ["TextBackend"]


class TextBackend(DocumentBackend):
    """Human-readable report, one block per record."""

    format = ExportFormat.TXT

    def narrate(self, records: Sequence[CareerRecord], context: RenderContext) -> ContentStream:
        return render_flat(
            records,
            include_metadata=context.include_metadata,
            today=context.now.date(),
        )

    def render_stream(self, stream: ContentStream, context: RenderContext) -> bytes:
        return stream_to_text(stream).encode("utf-8")
