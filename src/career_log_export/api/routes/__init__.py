"""Route handlers for the API."""

from career_log_export.api.routes import exports, health

__all__ = [
    "health",
    "exports",
]
