"""Title page extraction for Fountain scripts."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from fountainpress.parser.lines import Line, LineCursor


class TitleField(str, Enum):
    """Canonical title page keys."""

    TITLE = "title"
    CREDIT = "credit"
    AUTHOR = "author"
    SOURCE = "source"
    DRAFT_DATE = "draft date"
    CONTACT = "contact"
    COPYRIGHT = "copyright"
    NOTES = "notes"


# Spellings accepted in a script, lower-cased, mapped to their canonical key
TITLE_KEY_ALIASES: dict[str, TitleField] = {
    "title": TitleField.TITLE,
    "credit": TitleField.CREDIT,
    "author": TitleField.AUTHOR,
    "authors": TitleField.AUTHOR,
    "source": TitleField.SOURCE,
    "draft date": TitleField.DRAFT_DATE,
    "date": TitleField.DRAFT_DATE,
    "contact": TitleField.CONTACT,
    "copyright": TitleField.COPYRIGHT,
    "notes": TitleField.NOTES,
}


@dataclass(frozen=True)
class TitlePage:
    """Extracted title page fields and where the script body starts."""

    fields: dict[str, str] = field(default_factory=dict)
    cursor: int = 0


def parse_title_line(text: str) -> tuple[TitleField, str] | None:
    """Split a ``key: value`` line if its key is a recognized title key.

    Args:
        text: A single source line

    Returns:
        Tuple of (canonical key, value) or None when the line is not metadata
    """
    if ":" not in text:
        return None
    key, _, value = text.partition(":")
    canonical = TITLE_KEY_ALIASES.get(key.strip().lower())
    if canonical is None:
        return None
    return canonical, value.strip()


def _is_continuation(line: Line | None) -> bool:
    return (
        line is not None
        and line.is_indented
        and not line.is_blank
        and ":" not in line.raw
    )


def extract_title_page(lines: Sequence[str]) -> TitlePage:
    """Consume the leading title page block.

    Leading blank lines are skipped. Extraction stops at the first blank line
    or the first line that is not a recognized ``key: value`` pair; that line
    is left for the body.

    Args:
        lines: All source lines of the script

    Returns:
        TitlePage with the collected fields and the index of the first body line
    """
    cursor = LineCursor(lines)
    while (line := cursor.peek()) is not None and line.is_blank:
        cursor.advance()

    fields: dict[str, str] = {}
    while (line := cursor.peek()) is not None:
        parsed = parse_title_line(line.text)
        if parsed is None:
            break
        cursor.advance()
        key, value = parsed
        parts = [value] if value else []
        while _is_continuation(cursor.peek()):
            parts.append(cursor.advance().text)
        fields[key.value] = " ".join(parts)

    if not fields:
        return TitlePage(fields={}, cursor=0)
    return TitlePage(fields=fields, cursor=cursor.position)


def serialize_title_fields(fields: Mapping[str, str]) -> str:
    """Write title fields back out as ``key: value`` lines."""
    return "\n".join(f"{key}: {value}" for key, value in fields.items())
