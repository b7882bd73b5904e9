"""Narrative rendering of career records into a typed Content Stream.

The Content Stream is an ordered tuple of :class:`ContentLine` values, each
tagged as blank, header, bullet or paragraph. Two renderers produce it:

* :func:`render_flat` mirrors the plain-text report block for block and
  feeds both the ``txt`` serializer and the RTF backend.
* :func:`render_grouped` groups records by category and feeds the PDF
  layout engine.

The layout engine and the RTF generator consume the stream independently,
so neither has to guess which text is a header.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import (
    BULLET_GLYPH,
    BULLET_MARKERS,
    ENTRY_RULE,
    NOT_APPLICABLE,
    REPORT_TITLE,
    TAG_MARKER,
    TITLE_RULE,
)
from career_log_export.utils.dates import format_display_date, format_display_datetime
from career_log_export.utils.presentation import (
    collapse_whitespace,
    display_category,
    unique_in_order,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from career_log_export.models.record import CareerRecord

__all__ = [
    "ContentLine",
    "ContentStream",
    "LineKind",
    "parse_content_stream",
    "render_flat",
    "render_grouped",
    "stream_to_text",
    "strip_bullet_marker",
]


class LineKind(StrEnum):
    BLANK = "blank"
    HEADER = "header"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True, slots=True)
class ContentLine:
    """One typed line of narrative content."""

    kind: LineKind
    text: str = ""

    @classmethod
    def blank(cls) -> ContentLine:
        return cls(LineKind.BLANK)

    @classmethod
    def header(cls, text: str) -> ContentLine:
        return cls(LineKind.HEADER, text)

    @classmethod
    def bullet(cls, text: str) -> ContentLine:
        return cls(LineKind.BULLET, text)

    @classmethod
    def paragraph(cls, text: str) -> ContentLine:
        return cls(LineKind.PARAGRAPH, text)


ContentStream = tuple[ContentLine, ...]

_RULE_CHARS = frozenset("-=")


def strip_bullet_marker(text: str) -> str:
    """Remove one leading bullet marker and the whitespace after it."""
    stripped = text.lstrip()
    if stripped.startswith(BULLET_MARKERS):
        return stripped[1:].lstrip()
    return stripped


# -----------------------------------------------------------------------
# Internal builders


def _text_block(text: str) -> list[ContentLine]:
    """Map multi-line free text to paragraph lines, keeping empty lines blank."""
    lines: list[ContentLine] = []
    for raw in text.splitlines() or [""]:
        if raw.strip():
            lines.append(ContentLine.paragraph(raw))
        else:
            lines.append(ContentLine.blank())
    return lines


def _title_block(total: int, today: date) -> list[ContentLine]:
    return [
        ContentLine.header(REPORT_TITLE),
        ContentLine.paragraph(f"Generated: {format_display_date(today)}"),
        ContentLine.paragraph(f"Total Entries: {total}"),
    ]


def _flat_entry(index: int, record: CareerRecord, include_metadata: bool) -> list[ContentLine]:
    lines = [
        ContentLine.paragraph(f"Entry {index}"),
        ContentLine.paragraph(f"Date: {format_display_date(record.date)}"),
        ContentLine.paragraph(f"Category: {display_category(record.category)}"),
        ContentLine.paragraph(f"Project: {record.project or NOT_APPLICABLE}"),
        ContentLine.blank(),
        ContentLine.header("Description:"),
        *_text_block(record.description),
        ContentLine.blank(),
    ]

    if record.impact:
        lines.append(ContentLine.header("Impact:"))
        lines.extend(_text_block(record.impact))
        lines.append(ContentLine.blank())

    skills = unique_in_order(record.skills)
    if skills:
        lines.append(ContentLine.paragraph(f"Skills: {', '.join(skills)}"))

    tags = unique_in_order(record.tags)
    if tags:
        lines.append(ContentLine.paragraph(f"Tags: {', '.join(TAG_MARKER + t for t in tags)}"))

    if include_metadata:
        lines.extend(
            [
                ContentLine.blank(),
                ContentLine.header("Metadata:"),
                ContentLine.paragraph(f"  ID: {record.id}"),
                ContentLine.paragraph(f"  Created: {format_display_datetime(record.created_at)}"),
                ContentLine.paragraph(f"  Updated: {format_display_datetime(record.updated_at)}"),
            ]
        )

    lines.extend([ContentLine.blank(), ContentLine.paragraph(ENTRY_RULE), ContentLine.blank()])
    return lines


def _grouped_entry(index: int, record: CareerRecord) -> list[ContentLine]:
    lines = [
        ContentLine.paragraph(f"{index}. {format_display_date(record.date)}"),
        ContentLine.bullet(collapse_whitespace(record.description)),
    ]
    if record.impact:
        lines.append(ContentLine.paragraph(f"Impact: {collapse_whitespace(record.impact)}"))
    if record.project:
        lines.append(ContentLine.paragraph(f"Project: {record.project}"))
    skills = unique_in_order(record.skills)
    if skills:
        lines.append(ContentLine.paragraph(f"Skills: {', '.join(skills)}"))
    lines.append(ContentLine.blank())
    return lines


# -----------------------------------------------------------------------
# Public API


def render_flat(
    records: Sequence[CareerRecord],
    *,
    include_metadata: bool,
    today: date,
) -> ContentStream:
    """Render *records* in order as the plain report's Content Stream."""
    lines = _title_block(len(records), today)
    lines.extend([ContentLine.blank(), ContentLine.paragraph(TITLE_RULE), ContentLine.blank()])
    for index, record in enumerate(records, start=1):
        lines.extend(_flat_entry(index, record, include_metadata))
    return tuple(lines)


def render_grouped(records: Sequence[CareerRecord], *, today: date) -> ContentStream:
    """Render *records* grouped by category.

    Groups appear in the order their category is first met in *records*;
    records keep their relative order inside a group.
    """
    groups: dict[str, list[CareerRecord]] = {}
    for record in records:
        groups.setdefault(record.category, []).append(record)

    lines = _title_block(len(records), today)
    lines.append(ContentLine.blank())
    for category, members in groups.items():
        lines.append(ContentLine.header(f"{category.upper()} ({len(members)} entries):"))
        lines.append(ContentLine.blank())
        for index, record in enumerate(members, start=1):
            lines.extend(_grouped_entry(index, record))
        lines.append(ContentLine.blank())
    return tuple(lines)


def parse_content_stream(text: str) -> ContentStream:
    """Classify free text line by line.

    Empty lines are blank, separator rules made of ``-`` or ``=`` are
    paragraphs, lines starting with a bullet marker are bullets,
    other lines ending with a colon are headers and the rest are paragraphs.
    """
    lines: list[ContentLine] = []
    for raw in text.splitlines():
        stripped = raw.strip()
        if not stripped:
            lines.append(ContentLine.blank())
        elif _RULE_CHARS.issuperset(stripped):
            lines.append(ContentLine.paragraph(stripped))
        elif stripped.startswith(BULLET_MARKERS):
            lines.append(ContentLine.bullet(strip_bullet_marker(stripped)))
        elif stripped.endswith(":"):
            lines.append(ContentLine.header(stripped))
        else:
            lines.append(ContentLine.paragraph(stripped))
    return tuple(lines)


def stream_to_text(stream: ContentStream) -> str:
    """Join a Content Stream back into newline-separated plain text."""
    rendered = [
        f"{BULLET_GLYPH} {line.text}" if line.kind is LineKind.BULLET else line.text
        for line in stream
    ]
    return "\n".join(rendered) + "\n"
