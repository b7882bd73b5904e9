from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

import pytest

from career_log_export.api.dependencies import get_settings
from career_log_export.models import CareerRecord

RecordFactory = Callable[..., CareerRecord]


@pytest.fixture
def make_record() -> RecordFactory:
    """Build a valid record, overriding any field by keyword."""
    counter = iter(range(1, 10_000))

    def factory(**overrides: Any) -> CareerRecord:
        fields: dict[str, Any] = {
            "id": f"rec-{next(counter)}",
            "date": date(2024, 1, 1),
            "category": "achievement",
            "description": "Shipped the thing",
            "created_at": datetime(2024, 1, 1, 10, 0, tzinfo=UTC),
            "updated_at": datetime(2024, 1, 2, 15, 45, 30, tzinfo=UTC),
        }
        fields.update(overrides)
        return CareerRecord(**fields)

    return factory


@pytest.fixture
def sample_records(make_record: RecordFactory) -> list[CareerRecord]:
    """Three records in scrambled date order across two categories."""
    return [
        make_record(id="a", date=date(2024, 1, 1), category="skill", description="Learned Rust"),
        make_record(
            id="b",
            date=date(2024, 3, 1),
            category="achievement",
            description="Led the migration",
            impact="Cut costs by 20%",
            skills=["Python", "SQL", "Python"],
            tags=["infra"],
            project="Atlas",
        ),
        make_record(id="c", date=date(2024, 2, 1), category="skill", description="Learned Go"),
    ]


@pytest.fixture
def export_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point settings at a temporary output directory with fixed metadata."""
    output_dir = tmp_path / "exports"
    monkeypatch.setenv("CAREER_EXPORT_OUTPUT_DIR", output_dir.as_posix())
    monkeypatch.setenv("CAREER_EXPORT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CAREER_EXPORT_TITLE", "Test Log")
    monkeypatch.setenv("CAREER_EXPORT_AUTHOR", "Tester")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield output_dir
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_api_and_cli_settings(request: pytest.FixtureRequest) -> None:
    """Automatically isolate settings for tests in API and CLI test files."""
    stem = Path(str(request.node.fspath)).stem.lower()
    if "api" in stem or "cli" in stem:
        request.getfixturevalue("export_env")
