"""Pydantic schemas for export API endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from career_log_export.constants.export_constants import ExportFormat
from career_log_export.models.record import CareerRecord, ExportOptions


class ExportRequest(BaseModel):
    """Request schema for exporting a record collection."""

    records: list[CareerRecord] = Field(..., description="Records to export (filtered server-side)")
    options: ExportOptions = Field(default_factory=ExportOptions, description="Export choices")


class DocumentExportRequest(BaseModel):
    """Request schema for exporting free text as a document."""

    content: str = Field(..., description="Text to export; lines ending in ':' become headers")
    format: str = Field(ExportFormat.PDF.value, description="txt, pdf or docx")
    filename: str | None = Field(None, description="Filename without extension")
    title: str | None = Field(None, description="Document title (defaults to settings)")


class ExportStatsRequest(BaseModel):
    """Request schema for export statistics."""

    records: list[CareerRecord] = Field(..., description="Records to summarise")
    options: ExportOptions | None = Field(
        None, description="When given, also count the records an export would write"
    )


class ExportStatsResponse(BaseModel):
    """Response schema for export statistics."""

    total_entries: int
    category_counts: dict[str, int]
    earliest: date | None = None
    latest: date | None = None
    total_skills: int
    total_projects: int
    matching_entries: int | None = Field(
        None, description="Records matching the request options, if options were sent"
    )


class ExportErrorResponse(BaseModel):
    """Error body returned when an export produces no file."""

    kind: str
    message: str
    cause: str | None = None
