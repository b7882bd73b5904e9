"""Export coordinator.

Filters records, resolves the download filename, dispatches to the format
backend and turns every pipeline failure into a typed
:class:`ExportFailure`. Nothing here touches the filesystem; callers decide
how the returned bytes are saved.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import DocumentMetadata
from career_log_export.formats import (
    DocumentBackend,
    RenderContext,
    get_backend,
    list_document_formats,
)
from career_log_export.models.export import (
    EmptyResultError,
    ExportError,
    ExportFailure,
    ExportResult,
    RenderFailureError,
    UnsupportedFormatError,
)
from career_log_export.services.narrative import parse_content_stream
from career_log_export.services.record_filter import filter_records, is_selection_active
from career_log_export.utils.filenames import resolve_filename

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from career_log_export.formats import ExportBackend
    from career_log_export.models.export import ExportOutcome
    from career_log_export.models.record import CareerRecord, ExportOptions

logger = logging.getLogger(__name__)

__all__ = ["export_document", "export_records"]

NO_MATCHING_RECORDS = "No entries match the export criteria"
NO_CONTENT = "There is no content to export"


def _render(backend: ExportBackend, produce: Callable[[], bytes]) -> bytes:
    """Run *produce*, reporting rich-format errors as render failures."""
    if not backend.rich:
        return produce()
    try:
        return produce()
    except Exception as exc:
        label = backend.info.label
        msg = f"{label} export failed; retry with the text format instead"
        raise RenderFailureError(msg) from exc


def _fail(error: ExportError) -> ExportFailure:
    failure = ExportFailure.from_error(error)
    if isinstance(error, RenderFailureError):
        logger.exception("Export failed: %s", failure.message)
    else:
        logger.warning("Export failed: %s", failure.message)
    return failure


def export_records(
    records: Sequence[CareerRecord],
    options: ExportOptions,
    *,
    metadata: DocumentMetadata | None = None,
    now: datetime | None = None,
) -> ExportOutcome:
    """Export the records matching *options*.

    Args:
        records: Full record collection; filtering happens here.
        options: Format, filename and filter choices.
        metadata: Title/author/subject for PDF and RTF documents.
        now: Clock used for the default filename and report dates.

    Returns:
        :class:`ExportResult` with the payload, or :class:`ExportFailure`
        when no records match, the format is unknown, or rendering fails.
    """
    now = now or datetime.now(UTC)
    try:
        backend = get_backend(options.format)

        filtered = filter_records(records, options)
        if not filtered:
            raise EmptyResultError(NO_MATCHING_RECORDS)

        filename = resolve_filename(
            options.filename,
            backend.extension,
            now.date(),
            selected=is_selection_active(options),
        )
        context = RenderContext(
            now=now,
            include_metadata=options.include_metadata,
            metadata=metadata or DocumentMetadata(),
        )
        payload = _render(backend, lambda: backend.render(filtered, context))
    except ExportError as error:
        return _fail(error)

    logger.info("Exported %d records as %s to %s", len(filtered), backend.format, filename)
    return ExportResult(
        payload=payload,
        filename=filename,
        extension=backend.extension,
        media_type=backend.media_type,
        format=backend.format,
        record_count=len(filtered),
    )


def export_document(
    content: str,
    options: ExportOptions,
    *,
    metadata: DocumentMetadata | None = None,
    now: datetime | None = None,
) -> ExportOutcome:
    """Export free text as a ``txt``, ``pdf`` or ``docx`` document.

    The text is classified line by line into a Content Stream and handed to
    the document backend. Record filters in *options* are ignored.
    """
    now = now or datetime.now(UTC)
    try:
        backend = get_backend(options.format)
        if not isinstance(backend, DocumentBackend):
            available = ", ".join(list_document_formats())
            msg = f"Format {options.format!r} cannot export documents. Available: {available}"
            raise UnsupportedFormatError(msg)

        stream = parse_content_stream(content)
        if not any(line.text.strip() for line in stream):
            raise EmptyResultError(NO_CONTENT)

        filename = resolve_filename(options.filename, backend.extension, now.date())
        context = RenderContext(
            now=now,
            include_metadata=options.include_metadata,
            metadata=metadata or DocumentMetadata(),
        )
        payload = _render(backend, lambda: backend.render_stream(stream, context))
    except ExportError as error:
        return _fail(error)

    logger.info("Exported %d-line document as %s to %s", len(stream), backend.format, filename)
    return ExportResult(
        payload=payload,
        filename=filename,
        extension=backend.extension,
        media_type=backend.media_type,
        format=backend.format,
        record_count=0,
    )
