"""FastAPI application entry point for the career-log export API."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from career_log_export.api.routes import exports, health

app = FastAPI(
    title="Career Log Export API",
    description="API for exporting career-log records to CSV, JSON, text, PDF and Word",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(exports.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    from career_log_export.api.dependencies import get_settings
    from career_log_export.config import configure_logging

    configure_logging(get_settings())
    uvicorn.run(
        "career_log_export.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
