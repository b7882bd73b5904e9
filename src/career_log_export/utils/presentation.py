"""Small presentation helpers shared by the serializers and renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["collapse_whitespace", "display_category", "unique_in_order"]


def unique_in_order(values: Iterable[str]) -> list[str]:
    """Drop blanks and repeats while keeping first-seen order."""
    return list(dict.fromkeys(v.strip() for v in values if v and v.strip()))


def display_category(category: str) -> str:
    """``"skill"`` -> ``"Skill"``."""
    return category[:1].upper() + category[1:]


def collapse_whitespace(text: str) -> str:
    """Fold runs of whitespace, newlines included, into single spaces."""
    return " ".join(text.split())
