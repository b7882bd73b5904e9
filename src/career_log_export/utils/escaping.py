"""Escaping rules for embedding raw field text in CSV and RTF output."""

from __future__ import annotations

import re

__all__ = ["encode_rtf_unicode", "escape_csv_field", "escape_rtf"]

_RTF_BACKSLASH = re.compile(r"\\")
_RTF_BRACES = re.compile(r"([{}])")


def escape_csv_field(value: str) -> str:
    """Quote *value* for CSV.

    The value is always wrapped in double quotes and interior quotes are
    doubled. Newlines and commas are legal inside a quoted field and are
    left untouched.
    """
    return '"' + value.replace('"', '""') + '"'


def escape_rtf(text: str) -> str:
    r"""Escape RTF control characters in *text*.

    Handles: ``\ { }``
    """
    # Backslash first so the escapes added for braces are not doubled.
    result = _RTF_BACKSLASH.sub(r"\\\\", text)
    return _RTF_BRACES.sub(r"\\\1", result)


def encode_rtf_unicode(text: str) -> str:
    r"""Replace every non-ASCII character with an RTF ``\uN?`` escape.

    ``N`` is the signed 16-bit value of each UTF-16 code unit, so characters
    outside the BMP become a surrogate pair of escapes. ``?`` is the fallback
    shown by readers without Unicode support. The result is pure ASCII.
    """
    if text.isascii():
        return text
    parts: list[str] = []
    for char in text:
        if ord(char) < 128:
            parts.append(char)
            continue
        encoded = char.encode("utf-16-le")
        for offset in range(0, len(encoded), 2):
            unit = int.from_bytes(encoded[offset : offset + 2], "little")
            parts.append(f"\\u{unit - 0x10000 if unit > 0x7FFF else unit}?")
    return "".join(parts)
