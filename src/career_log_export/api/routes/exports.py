"""Export routes for the API."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from career_log_export.api.dependencies import get_settings
from career_log_export.api.schemas.exports import (
    DocumentExportRequest,
    ExportErrorResponse,
    ExportRequest,
    ExportStatsRequest,
    ExportStatsResponse,
)
from career_log_export.config import ExportSettings
from career_log_export.models import ExportErrorKind, ExportFailure, ExportOptions
from career_log_export.models.export import ExportOutcome
from career_log_export.services.export_stats import count_matching, get_export_stats
from career_log_export.services.exporter import export_document, export_records

router = APIRouter(prefix="/exports", tags=["exports"])

_STATUS_BY_KIND = {
    # Starlette's name for 422 differs between releases.
    ExportErrorKind.EMPTY_RESULT: 422,
    ExportErrorKind.UNSUPPORTED_FORMAT: status.HTTP_400_BAD_REQUEST,
    ExportErrorKind.RENDER_FAILURE: status.HTTP_502_BAD_GATEWAY,
}

_ERROR_RESPONSES = {
    code: {"model": ExportErrorResponse} for code in (400, 422, 502)
}


def _content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and the RFC 5987 UTF-8 name.

    Header values are latin-1 on the wire, so non-ASCII names only travel
    percent-encoded in ``filename*``.
    """
    fallback = filename.encode("ascii", errors="replace").decode("ascii").replace("?", "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _to_response(outcome: ExportOutcome) -> Response:
    """Return the payload as a download, or raise the mapped HTTP error."""
    if isinstance(outcome, ExportFailure):
        raise HTTPException(
            status_code=_STATUS_BY_KIND[outcome.kind],
            detail=ExportErrorResponse(
                kind=outcome.kind, message=outcome.message, cause=outcome.cause
            ).model_dump(),
        )
    return Response(
        content=outcome.payload,
        media_type=outcome.media_type,
        headers={
            "Content-Disposition": _content_disposition(outcome.filename),
            "X-Record-Count": str(outcome.record_count),
        },
    )


@router.post("", responses=_ERROR_RESPONSES)
def export_records_endpoint(
    data: ExportRequest,
    settings: Annotated[ExportSettings, Depends(get_settings)],
) -> Response:
    """Filter the submitted records and download them in the requested format."""
    outcome = export_records(data.records, data.options, metadata=settings.document_metadata())
    return _to_response(outcome)


@router.post("/document", responses=_ERROR_RESPONSES)
def export_document_endpoint(
    data: DocumentExportRequest,
    settings: Annotated[ExportSettings, Depends(get_settings)],
) -> Response:
    """Download free text as a txt, pdf or docx document."""
    metadata = settings.document_metadata()
    if data.title:
        metadata = replace(metadata, title=data.title)
    options = ExportOptions(format=data.format, filename=data.filename)
    return _to_response(export_document(data.content, options, metadata=metadata))


@router.post("/stats", response_model=ExportStatsResponse)
def export_stats_endpoint(data: ExportStatsRequest) -> ExportStatsResponse:
    """Summarise the submitted records before exporting them."""
    stats = get_export_stats(data.records)
    earliest, latest = stats.date_range or (None, None)
    return ExportStatsResponse(
        total_entries=stats.total_entries,
        category_counts=stats.category_counts,
        earliest=earliest,
        latest=latest,
        total_skills=stats.total_skills,
        total_projects=stats.total_projects,
        matching_entries=(
            count_matching(data.records, data.options) if data.options is not None else None
        ),
    )
