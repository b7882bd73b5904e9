"""RTF generation for the "Word" export.

The output is legacy RTF markup, not an OOXML container. Word processors
open it directly even when it is saved under a ``.docx`` name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_log_export.constants.export_constants import RTF_FONT_NAME
from career_log_export.services.narrative import LineKind, strip_bullet_marker
from career_log_export.utils.escaping import encode_rtf_unicode, escape_rtf

if TYPE_CHECKING:
    from career_log_export.services.narrative import ContentStream

__all__ = ["generate_rtf"]

_BODY_FONT = r"\f0\fs22 "
_PARAGRAPH = r"\par "


def _rtf_text(text: str) -> str:
    return encode_rtf_unicode(escape_rtf(text))


def generate_rtf(
    stream: ContentStream,
    title: str | None = None,
    font_name: str = RTF_FONT_NAME,
) -> str:
    r"""Render *stream* as a single RTF document.

    Args:
        stream: Content Stream to render.
        title: Optional document title, emitted as a ``\title`` directive.
        font_name: Font declared as ``\f0`` in the font table.

    Returns:
        ASCII-only RTF markup starting with ``{\rtf1`` and ending with ``}``.
    """
    parts = [rf"{{\rtf1\ansi\deff0 {{\fonttbl {{\f0 {_rtf_text(font_name)};}}}}"]
    if title:
        parts.append(rf"\title {_rtf_text(title)}")
    parts.append(_BODY_FONT)

    for line in stream:
        if line.kind is LineKind.BLANK:
            parts.append(_PARAGRAPH)
        elif line.kind is LineKind.HEADER:
            parts.append(rf"\par\b\fs26 {_rtf_text(line.text.strip())}\b0\fs22\par ")
        elif line.kind is LineKind.BULLET:
            parts.append(rf"\par\bullet {_rtf_text(strip_bullet_marker(line.text))}")
        else:
            parts.append(rf"\par {_rtf_text(line.text)}")

    parts.append("}")
    return "".join(parts)
