"""Tests for the export API."""

from __future__ import annotations

import importlib
import json
import warnings

import pytest
from fastapi.testclient import TestClient

from career_log_export.api.main import app
from career_log_export.api.routes import exports as exports_routes
from career_log_export.formats.docx_format import DocxBackend
from career_log_export.models import ExportErrorKind

RECORDS = [
    {
        "id": "a",
        "date": "2024-01-01",
        "category": "skill",
        "description": "Learned Rust",
        "skills": ["Rust", "Cargo"],
        "created_at": "2024-01-01T10:00:00Z",
        "updated_at": "2024-01-01T10:00:00Z",
    },
    {
        "id": "b",
        "date": "2024-03-01",
        "category": "achievement",
        "description": "Led the migration",
        "project": "Atlas",
        "skills": ["Rust"],
        "createdAt": "2024-03-01T10:00:00Z",
        "updatedAt": "2024-03-01T10:00:00Z",
    },
]


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["formats"] == ["csv", "json", "txt", "pdf", "docx"]


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self) -> None:
        assert app.title == "Career Log Export API"

    def test_cors_middleware_is_configured(self) -> None:
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes


class TestExportEndpoint:
    """Tests for POST /api/exports."""

    def test_csv_download(self, client: TestClient) -> None:
        response = client.post("/api/exports", json={"records": RECORDS})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.headers["content-disposition"].startswith('attachment; filename="career')
        assert response.headers["x-record-count"] == "2"
        assert response.text.split("\n")[1].startswith('"2024-03-01"')

    def test_json_with_options(self, client: TestClient) -> None:
        payload = {
            "records": RECORDS,
            "options": {
                "format": "json",
                "filename": "mine",
                "include_metadata": False,
                "categories": ["skill"],
            },
        }
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 200
        assert 'filename="mine.json"' in response.headers["content-disposition"]
        data = json.loads(response.content)
        assert data["totalEntries"] == 1
        assert "id" not in data["entries"][0]

    def test_pdf_download(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"format": "pdf"}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_docx_uses_settings_title(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"format": "docx"}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 200
        assert b"\\title Test Log" in response.content

    def test_empty_result_is_422(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"categories": ["networking"]}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "empty_result"

    def test_unsupported_format_is_400(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"format": "xlsx"}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "unsupported_format"

    def test_render_failure_is_502(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken(self, stream, context):
            raise OSError("disk full")

        monkeypatch.setattr(DocxBackend, "render_stream", broken)
        payload = {"records": RECORDS, "options": {"format": "docx"}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["kind"] == "render_failure"
        assert detail["cause"] == "OSError: disk full"

    def test_non_ascii_filename(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"format": "csv", "filename": "履歴"}}
        response = client.post("/api/exports", json=payload)
        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert 'filename="__.csv"' in disposition
        assert "filename*=UTF-8''%E5%B1%A5%E6%AD%B4.csv" in disposition

    def test_invalid_record_date_is_rejected(self, client: TestClient) -> None:
        bad = [{**RECORDS[0], "date": "not-a-date"}]
        response = client.post("/api/exports", json={"records": bad})
        assert response.status_code == 422


class TestStatsEndpoint:
    """Tests for POST /api/exports/stats."""

    def test_stats(self, client: TestClient) -> None:
        response = client.post("/api/exports/stats", json={"records": RECORDS})
        assert response.status_code == 200
        data = response.json()
        assert data["total_entries"] == 2
        assert data["category_counts"] == {"skill": 1, "achievement": 1}
        assert data["earliest"] == "2024-01-01"
        assert data["latest"] == "2024-03-01"
        assert data["total_skills"] == 2
        assert data["total_projects"] == 1
        assert data["matching_entries"] is None

    def test_matching_entries(self, client: TestClient) -> None:
        payload = {"records": RECORDS, "options": {"selected_only": True, "selected_ids": ["b"]}}
        response = client.post("/api/exports/stats", json=payload)
        assert response.json()["matching_entries"] == 1

    def test_empty_collection(self, client: TestClient) -> None:
        data = client.post("/api/exports/stats", json={"records": []}).json()
        assert data["total_entries"] == 0
        assert data["earliest"] is None


class TestDocumentEndpoint:
    """Tests for POST /api/exports/document."""

    def test_text_document(self, client: TestClient) -> None:
        payload = {"content": "Summary:\n* one", "format": "txt", "filename": "summary"}
        response = client.post("/api/exports/document", json=payload)
        assert response.status_code == 200
        assert 'filename="summary.txt"' in response.headers["content-disposition"]
        assert response.text == "Summary:\n• one\n"

    def test_title_override(self, client: TestClient) -> None:
        payload = {"content": "Body text", "format": "docx", "title": "Custom"}
        response = client.post("/api/exports/document", json=payload)
        assert b"\\title Custom" in response.content

    def test_defaults_to_pdf(self, client: TestClient) -> None:
        response = client.post("/api/exports/document", json={"content": "Hello"})
        assert response.content.startswith(b"%PDF")

    def test_non_ascii_filename(self, client: TestClient) -> None:
        payload = {"content": "Notes:\n- résumé", "format": "docx", "filename": "Café notes"}
        response = client.post("/api/exports/document", json=payload)
        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert 'filename="Caf_ notes.docx"' in disposition
        assert "filename*=UTF-8''Caf%C3%A9%20notes.docx" in disposition
        assert response.content.isascii()

    def test_json_is_not_a_document_format(self, client: TestClient) -> None:
        response = client.post("/api/exports/document", json={"content": "x", "format": "json"})
        assert response.status_code == 400

    def test_blank_content_is_422(self, client: TestClient) -> None:
        response = client.post("/api/exports/document", json={"content": "\n", "format": "txt"})
        assert response.status_code == 422


class TestStatusMapping:
    """Tests for the failure-kind to HTTP status table."""

    def test_module_import_emits_no_status_deprecation(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            importlib.reload(exports_routes)
        assert not [w for w in caught if "HTTP_422" in str(w.message)]
        assert exports_routes._STATUS_BY_KIND[ExportErrorKind.EMPTY_RESULT] == 422
