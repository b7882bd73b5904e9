"""Word-compatible export written as RTF markup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import DocumentBackend
from career_log_export.services.narrative import render_flat
from career_log_export.services.rich_markup import generate_rtf

if TYPE_CHECKING:
    from collections.abc import Sequence

    from career_log_export.formats.base import RenderContext
    from career_log_export.models.record import CareerRecord
    from career_log_export.services.narrative import ContentStream

__all__ = ["DocxBackend"]


class DocxBackend(DocumentBackend):
    """Flat narrative report rendered as RTF."""

    format = ExportFormat.DOCX
    rich = True

    def narrate(self, records: Sequence[CareerRecord], context: RenderContext) -> ContentStream:
        return render_flat(
            records,
            include_metadata=context.include_metadata,
            today=context.now.date(),
        )

    def render_stream(self, stream: ContentStream, context: RenderContext) -> bytes:
        return generate_rtf(stream, title=context.metadata.title).encode("ascii")
