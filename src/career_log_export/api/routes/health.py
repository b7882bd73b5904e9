"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from career_log_export.formats import list_formats

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str | list[str]]:
    """Return the current status of the API and the formats it can export."""
    return {"status": "healthy", "formats": list_formats()}
