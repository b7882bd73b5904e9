from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from career_log_export.config import configure_logging, load_settings
from career_log_export.constants.export_constants import FORMAT_INFO, ExportFormat, RecordCategory
from career_log_export.formats import list_document_formats, list_formats
from career_log_export.models import CareerRecord, DateRange, ExportFailure, ExportOptions
from career_log_export.services.export_stats import ExportStats, get_export_stats
from career_log_export.services.exporter import export_document, export_records
from career_log_export.utils.dates import format_display_date

_RECORDS = TypeAdapter(list[CareerRecord])


class RecordFileError(Exception):
    """Raised when the input file cannot be read as a list of records."""


def load_records(path: Path) -> list[CareerRecord]:
    """Read records from a JSON file.

    Accepts either a bare list of records or an export envelope with an
    ``entries`` key, so files produced by the JSON export can be re-read.

    Raises:
        RecordFileError: If the file is missing, not JSON, or a record is invalid.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RecordFileError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordFileError(f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc

    if isinstance(data, dict):
        data = data.get("entries", [])
    try:
        return _RECORDS.validate_python(data)
    except ValidationError as exc:
        raise RecordFileError(f"{path} contains invalid records:\n{exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="career-log-export",
        description="Export career-log records to CSV, JSON, text, PDF or Word (RTF).",
    )
    parser.add_argument("input", type=Path, help="JSON file of records (or text with --document)")
    parser.add_argument(
        "-f",
        "--format",
        default=ExportFormat.CSV.value,
        choices=list_formats(),
        help="; ".join(f"{fmt}: {info.description}" for fmt, info in FORMAT_INFO.items()),
    )
    parser.add_argument("-o", "--output-dir", type=Path, help="Directory to write into")
    parser.add_argument("--filename", help="Filename without extension")
    parser.add_argument(
        "--no-metadata",
        dest="include_metadata",
        action="store_false",
        help="Leave out record ids and timestamps",
    )
    parser.add_argument("--start", type=date.fromisoformat, help="Earliest date (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="Latest date (YYYY-MM-DD)")
    parser.add_argument(
        "--category",
        action="append",
        default=[],
        choices=[c.value for c in RecordCategory],
        help="Only export this category (repeatable)",
    )
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="ID",
        help="Only export the record with this id (repeatable)",
    )
    parser.add_argument("--stats", action="store_true", help="Print statistics and exit")
    parser.add_argument(
        "--document",
        action="store_true",
        help=f"Treat input as free text ({', '.join(list_document_formats())} only)",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> ExportOptions:
    date_range = None
    if args.start or args.end:
        date_range = DateRange(start=args.start, end=args.end)
    return ExportOptions(
        format=args.format,
        filename=args.filename,
        include_metadata=args.include_metadata,
        date_range=date_range,
        categories=args.category,
        selected_only=bool(args.select),
        selected_ids=set(args.select),
    )


def _print_stats(stats: ExportStats) -> None:
    print(f"Total entries: {stats.total_entries}")
    if stats.date_range:
        earliest, latest = stats.date_range
        print(f"Date range:    {format_display_date(earliest)} - {format_display_date(latest)}")
    print(f"Skills:        {stats.total_skills}")
    print(f"Projects:      {stats.total_projects}")
    for category, count in stats.category_counts.items():
        print(f"  {category:<12} {count}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run one export.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings)
    options = _options_from_args(args)

    if args.document:
        try:
            content = args.input.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"❌ Error: Cannot read {args.input}: {exc.strerror or exc}")
            return 1
        outcome = export_document(content, options, metadata=settings.document_metadata())
    else:
        try:
            records = load_records(args.input)
        except RecordFileError as exc:
            print(f"❌ Error: {exc}")
            return 1

        if args.stats:
            _print_stats(get_export_stats(records))
            return 0
        outcome = export_records(records, options, metadata=settings.document_metadata())

    if isinstance(outcome, ExportFailure):
        print(f"❌ Export failed ({outcome.kind}): {outcome.message}")
        if outcome.cause:
            print(f"   Cause: {outcome.cause}")
        return 1

    output_dir = args.output_dir or settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / outcome.filename
    output_path.write_bytes(outcome.payload)

    noun = "entries" if outcome.record_count != 1 else "entry"
    summary = f"{outcome.record_count} {noun}" if not args.document else "document"
    print(f"✅ Exported {summary} to {output_path}")
    return 0


def main() -> int:
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
