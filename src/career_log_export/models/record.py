"""Pydantic models for career-log records and export options."""

from __future__ import annotations

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from career_log_export.constants.export_constants import ExportFormat, RecordCategory


class CareerRecord(BaseModel):
    """One user-entered career log item.

    ``date`` is a calendar date; strings that are not valid ISO dates are
    rejected when the record is built, so ordering and range comparisons
    never see malformed values. Timestamps accept both snake_case and the
    web client's camelCase keys, and dump by alias as camelCase so JSON
    exports can be read back by either side.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    date: dt.date
    category: RecordCategory
    description: str
    impact: str | None = None
    skills: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    project: str | None = None
    created_at: dt.datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"), serialization_alias="createdAt"
    )
    updated_at: dt.datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"), serialization_alias="updatedAt"
    )


class DateRange(BaseModel):
    """Inclusive calendar-date bounds; either end may be omitted."""

    model_config = ConfigDict(frozen=True)

    start: dt.date | None = None
    end: dt.date | None = None

    def contains(self, day: dt.date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


class ExportOptions(BaseModel):
    """User choices for a single export request.

    ``format`` is kept as a plain string so that requests naming an unknown
    format reach the exporter and come back as a typed failure.
    """

    format: str = Field(ExportFormat.CSV.value, description="Target export format")
    filename: str | None = Field(None, description="Explicit filename (extension optional)")
    include_metadata: bool = Field(True, description="Include id and timestamps")
    date_range: DateRange | None = Field(None, description="Inclusive date bounds")
    categories: list[RecordCategory] = Field(
        default_factory=list, description="Category allow-set; empty means all"
    )
    selected_only: bool = Field(False, description="Restrict to selected record ids")
    selected_ids: set[str] = Field(default_factory=set, description="Selected record ids")

    @model_validator(mode="after")
    def _blank_filename_is_none(self) -> ExportOptions:
        if self.filename is not None and not self.filename.strip():
            self.filename = None
        return self
