"""Paginated PDF export grouped by category."""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.formats.base import DocumentBackend
from career_log_export.services.layout import PageGeometry, render_pdf
from career_log_export.services.narrative import render_grouped

if TYPE_CHECKING:
    from collections.abc import Sequence

    from career_log_export.formats.base import RenderContext
    from career_log_export.models.record import CareerRecord
    from career_log_export.services.narrative import ContentStream

__all__ = ["PdfBackend"]


class PdfBackend(DocumentBackend):
    """Styled A4 document laid out by :class:`TextLayoutEngine`."""

    format = ExportFormat.PDF
    rich = True

    def __init__(self, geometry: PageGeometry | None = None) -> None:
        self.geometry = geometry or PageGeometry()

    def narrate(self, records: Sequence[CareerRecord], context: RenderContext) -> ContentStream:
        return render_grouped(records, today=context.now.date())

    def render_stream(self, stream: ContentStream, context: RenderContext) -> bytes:
        return render_pdf(stream, context.metadata, self.geometry)
