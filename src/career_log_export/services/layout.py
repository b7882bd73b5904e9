"""Text layout and pagination for the PDF export.

:class:`TextLayoutEngine` turns a Content Stream into positioned text
placements on fixed-size pages. Widths come from a ``measure`` callable so
the arithmetic can run against real font metrics (fpdf2) or a stub in tests.
:func:`render_pdf` wires the engine to fpdf2 and draws the placements.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fpdf import FPDF

from career_log_export.constants.export_constants import BULLET_GLYPH, DocumentMetadata
from career_log_export.services.narrative import LineKind, strip_bullet_marker

if TYPE_CHECKING:
    from career_log_export.services.narrative import ContentLine, ContentStream

logger = logging.getLogger(__name__)

__all__ = [
    "BODY_STYLE",
    "HEADER_STYLE",
    "LayoutResult",
    "PageGeometry",
    "Placement",
    "TextLayoutEngine",
    "TextStyle",
    "fpdf_measure",
    "render_pdf",
    "to_pdf_text",
    "wrap_text",
]


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Font family, fpdf style string (``""`` or ``"B"``) and size in points."""

    family: str
    weight: str
    size: float


BODY_STYLE = TextStyle("Helvetica", "", 11)
HEADER_STYLE = TextStyle("Helvetica", "B", 13)


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size and spacing in points. Defaults are A4 portrait."""

    width: float = 595.28
    height: float = 841.89
    margin: float = 40
    line_height: float = 16
    header_offset: float = 20
    header_gap: float = 8
    line_gap: float = 4

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.margin + self.header_offset

    @property
    def bottom(self) -> float:
        return self.height - self.margin


@dataclass(frozen=True, slots=True)
class Placement:
    """A single visual line of text at a position on a 1-based page."""

    page: int
    x: float
    y: float
    text: str
    style: TextStyle


@dataclass(frozen=True, slots=True)
class LayoutResult:
    placements: tuple[Placement, ...]
    page_count: int


Measure = Callable[[str, TextStyle], float]


def wrap_text(text: str, max_width: float, measure: Measure, style: TextStyle) -> list[str]:
    """Greedily break *text* into lines no wider than *max_width*.

    Words are added to the current line while it still fits. A word that is
    wider than *max_width* on its own gets a line to itself; words are never
    split.
    """
    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if measure(candidate, style) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


@dataclass
class _Cursor:
    top: float
    page: int = 1
    y: float = field(init=False)

    def __post_init__(self) -> None:
        self.y = self.top

    def new_page(self) -> None:
        self.page += 1
        self.y = self.top


class TextLayoutEngine:
    """Paginates a Content Stream onto pages of a fixed geometry."""

    def __init__(self, geometry: PageGeometry, measure: Measure) -> None:
        self.geometry = geometry
        self.measure = measure

    def layout(self, stream: ContentStream) -> LayoutResult:
        cursor = _Cursor(self.geometry.top)
        placements: list[Placement] = []

        for line in stream:
            self._break_if_full(cursor)

            if line.kind is LineKind.BLANK:
                cursor.y += self.geometry.line_height / 2
                continue

            style, gap, visual_lines = self._wrap_line(line)
            for text in visual_lines:
                self._break_if_full(cursor)
                placements.append(
                    Placement(cursor.page, self.geometry.margin, cursor.y, text, style)
                )
                cursor.y += self.geometry.line_height
            cursor.y += gap

        return LayoutResult(tuple(placements), cursor.page)

    def _break_if_full(self, cursor: _Cursor) -> None:
        if cursor.y > self.geometry.bottom:
            cursor.new_page()

    def _wrap_line(self, line: ContentLine) -> tuple[TextStyle, float, list[str]]:
        width = self.geometry.printable_width
        if line.kind is LineKind.HEADER:
            wrapped = wrap_text(line.text.strip(), width, self.measure, HEADER_STYLE)
            return HEADER_STYLE, self.geometry.header_gap, wrapped
        if line.kind is LineKind.BULLET:
            text = f"{BULLET_GLYPH} {strip_bullet_marker(line.text)}"
            wrapped = wrap_text(text, width, self.measure, BODY_STYLE)
            return BODY_STYLE, self.geometry.line_gap, wrapped
        wrapped = wrap_text(line.text, width, self.measure, BODY_STYLE)
        return BODY_STYLE, self.geometry.line_gap, wrapped


# -----------------------------------------------------------------------
# fpdf2 backend

# Core PDF fonts only cover latin-1.
_PDF_TRANSLATION = str.maketrans(
    {
        BULLET_GLYPH: "\u00b7",
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u2013": "-",
        "\u2014": "-",
        "\u2026": "...",
    }
)


def to_pdf_text(text: str) -> str:
    """Fold *text* onto the latin-1 range the core PDF fonts can draw."""
    text = text.translate(_PDF_TRANSLATION)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _new_document(geometry: PageGeometry) -> FPDF:
    pdf = FPDF(orientation="portrait", unit="pt", format=(geometry.width, geometry.height))
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(geometry.margin, geometry.margin, geometry.margin)
    return pdf


def fpdf_measure(pdf: FPDF) -> Measure:
    """Return a width function backed by *pdf*'s font metrics."""

    def measure(text: str, style: TextStyle) -> float:
        pdf.set_font(style.family, style.weight, style.size)
        return pdf.get_string_width(to_pdf_text(text))

    return measure


def render_pdf(
    stream: ContentStream,
    metadata: DocumentMetadata | None = None,
    geometry: PageGeometry | None = None,
) -> bytes:
    """Lay out *stream* and return the encoded PDF document."""
    geometry = geometry or PageGeometry()
    metadata = metadata or DocumentMetadata()

    pdf = _new_document(geometry)
    pdf.set_title(metadata.title)
    pdf.set_author(metadata.author)
    pdf.set_subject(metadata.subject)

    result = TextLayoutEngine(geometry, fpdf_measure(pdf)).layout(stream)

    for placement in result.placements:
        while pdf.page < placement.page:
            pdf.add_page()
        style = placement.style
        pdf.set_font(style.family, style.weight, style.size)
        pdf.text(placement.x, placement.y, to_pdf_text(placement.text))
    while pdf.page < result.page_count:
        pdf.add_page()

    logger.debug("Laid out %d lines on %d pages", len(result.placements), result.page_count)
    return bytes(pdf.output())
