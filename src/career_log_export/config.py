"""Runtime settings for the CLI and HTTP surfaces.

Values come from environment variables, optionally loaded from a ``.env``
file. The export pipeline itself reads no environment; callers pass the
resolved :class:`DocumentMetadata` in.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from career_log_export.constants.export_constants import DocumentMetadata

__all__ = ["ExportSettings", "configure_logging", "load_settings"]

_DEFAULT_OUTPUT_DIR = "exports"
_DEFAULT_LOG_LEVEL = "INFO"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True, slots=True)
class ExportSettings:
    """Resolved settings.

    Attributes:
        output_dir: Directory the CLI writes exports into.
        log_level: Name of the logging level, e.g. ``"INFO"``.
        title: Document title embedded in PDF and RTF output.
        author: Document author embedded in PDF output.
    """

    output_dir: Path
    log_level: str
    title: str
    author: str

    def document_metadata(self) -> DocumentMetadata:
        return DocumentMetadata(title=self.title, author=self.author)


def load_settings(*, env_file: str | Path | None = None) -> ExportSettings:
    """Load settings from the environment.

    Args:
        env_file: Optional ``.env`` path. Without one, python-dotenv searches
            from the working directory upwards. Existing environment values
            always win.
    """
    load_dotenv(env_file)
    defaults = DocumentMetadata()
    level = os.environ.get("CAREER_EXPORT_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    return ExportSettings(
        output_dir=Path(os.environ.get("CAREER_EXPORT_OUTPUT_DIR", _DEFAULT_OUTPUT_DIR)),
        log_level=level if level in logging.getLevelNamesMapping() else _DEFAULT_LOG_LEVEL,
        title=os.environ.get("CAREER_EXPORT_TITLE", defaults.title),
        author=os.environ.get("CAREER_EXPORT_AUTHOR", defaults.author),
    )


def configure_logging(settings: ExportSettings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
