"""Shared dependencies for API routes."""

from __future__ import annotations

from functools import lru_cache

from career_log_export.config import ExportSettings, load_settings


@lru_cache(maxsize=1)
def get_settings() -> ExportSettings:
    """Return settings loaded once per process.

    Tests replace this through ``app.dependency_overrides``.
    """
    return load_settings()
