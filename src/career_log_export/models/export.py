"""Export outcomes and the errors that can end an export."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from career_log_export.constants.export_constants import ExportFormat


class ExportErrorKind(StrEnum):
    """Why an export produced no payload."""

    EMPTY_RESULT = "empty_result"
    UNSUPPORTED_FORMAT = "unsupported_format"
    RENDER_FAILURE = "render_failure"


class ExportError(RuntimeError):
    """Base class for failures raised inside the export pipeline."""

    kind: ExportErrorKind


class EmptyResultError(ExportError):
    """Raised when no records remain after filtering."""

    kind = ExportErrorKind.EMPTY_RESULT


class UnsupportedFormatError(ExportError):
    """Raised when the requested format has no registered backend."""

    kind = ExportErrorKind.UNSUPPORTED_FORMAT


class RenderFailureError(ExportError):
    """Raised when the PDF layout or RTF markup stage fails."""

    kind = ExportErrorKind.RENDER_FAILURE


@dataclass(frozen=True, slots=True)
class ExportResult:
    """A complete, ready-to-save export.

    Attributes:
        payload: Encoded document bytes.
        filename: Suggested filename, extension included.
        extension: Extension appended to the filename (no leading dot).
        media_type: Declared media type of ``payload``.
        format: Format the payload was rendered in.
        record_count: Number of records written.
    """

    payload: bytes
    filename: str
    extension: str
    media_type: str
    format: ExportFormat
    record_count: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ExportFailure:
    """A typed export failure callers can branch on."""

    kind: ExportErrorKind
    message: str
    cause: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: ExportError) -> ExportFailure:
        cause = error.__cause__
        return cls(
            kind=error.kind,
            message=str(error),
            cause=f"{type(cause).__name__}: {cause}" if cause is not None else None,
        )


ExportOutcome = ExportResult | ExportFailure
