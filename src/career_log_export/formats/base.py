"""Abstract base classes for pluggable export formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from career_log_export.constants.export_constants import (
    FORMAT_INFO,
    DocumentMetadata,
    ExportFormat,
    FormatInfo,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from career_log_export.models.record import CareerRecord
    from career_log_export.services.narrative import ContentStream

__all__ = ["DocumentBackend", "ExportBackend", "RenderContext"]


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Per-request settings every backend may read."""

    now: datetime
    include_metadata: bool = True
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


class ExportBackend(ABC):
    """Interface that every export format must implement."""

    format: ClassVar[ExportFormat]
    # PDF and RTF output; failures there are reported as render failures.
    rich: ClassVar[bool] = False

    @property
    def info(self) -> FormatInfo:
        return FORMAT_INFO[self.format]

    @property
    def extension(self) -> str:
        return self.info.extension

    @property
    def media_type(self) -> str:
        return self.info.media_type

    @abstractmethod
    def render(self, records: Sequence[CareerRecord], context: RenderContext) -> bytes:
        """Serialize already-filtered *records* to the encoded payload."""


class DocumentBackend(ExportBackend):
    """A format that renders a narrative Content Stream.

    Records are first narrated into a stream, so free text parsed into a
    stream can go through the same backend.
    """

    @abstractmethod
    def narrate(self, records: Sequence[CareerRecord], context: RenderContext) -> ContentStream:
        """Build the Content Stream for *records*."""

    @abstractmethod
    def render_stream(self, stream: ContentStream, context: RenderContext) -> bytes:
        """Encode *stream* as this format's payload."""

    def render(self, records: Sequence[CareerRecord], context: RenderContext) -> bytes:
        return self.render_stream(self.narrate(records, context), context)
