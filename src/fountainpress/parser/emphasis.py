"""Inline markup resolution for Fountain prose.

Handles everything that can appear inside a single line of text: boneyard
comments, notes, backslash escapes and emphasis spans.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Boneyard comments may span lines when applied to a whole script
BONEYARD_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
NOTE_PATTERN = re.compile(r"\[\[(.*?)\]\]")
ESCAPE_PATTERN = re.compile(r"\\(.)")

NOTE_MARKER = "<!--note-->"

# Escaped characters are parked in the Unicode private use area while the
# emphasis patterns run, then swapped back.
_PLACEHOLDER_OPEN = "\ue000"
_PLACEHOLDER_CLOSE = "\ue001"
_PLACEHOLDER_PATTERN = re.compile(f"{_PLACEHOLDER_OPEN}(\\d+){_PLACEHOLDER_CLOSE}")

# Longest marker first so *** is never read as ** followed by *
EMPHASIS_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<b><i>\1</i></b>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<b>\1</b>"),
    (re.compile(r"\*(.+?)\*"), r"<i>\1</i>"),
    (re.compile(r"_(.+?)_"), r"<u>\1</u>"),
)


@dataclass(frozen=True)
class InlineText:
    """Resolved prose and the notes lifted out of it."""

    text: str
    notes: tuple[str, ...] = ()


def strip_boneyard(text: str) -> str:
    """Remove every ``/* ... */`` span from text."""
    return BONEYARD_PATTERN.sub("", text)


def extract_notes(text: str) -> tuple[str, list[str]]:
    """Replace ``[[...]]`` notes with the note marker.

    Returns:
        Tuple of (text with markers, note contents in order)
    """
    notes: list[str] = []

    def _lift(match: re.Match[str]) -> str:
        notes.append(match.group(1).strip())
        return NOTE_MARKER

    return NOTE_PATTERN.sub(_lift, text), notes


def apply_emphasis(text: str) -> str:
    """Rewrite emphasis markers as inline tags."""
    for pattern, replacement in EMPHASIS_RULES:
        text = pattern.sub(replacement, text)
    return text


def resolve_inline(text: str) -> InlineText:
    """Resolve the inline markup of one logical line.

    Order matters: boneyard removal, escape recording, note extraction,
    emphasis, then substitution of the escaped literals.

    Args:
        text: A single line of prose

    Returns:
        InlineText with the rewritten text and any notes it carried
    """
    text = strip_boneyard(text)

    literals: list[str] = []

    def _park(match: re.Match[str]) -> str:
        literals.append(match.group(1))
        return f"{_PLACEHOLDER_OPEN}{len(literals) - 1}{_PLACEHOLDER_CLOSE}"

    def _restore(match: re.Match[str]) -> str:
        index = int(match.group(1))
        # Placeholder-like text already present in the source stays as is
        return literals[index] if index < len(literals) else match.group(0)

    text = ESCAPE_PATTERN.sub(_park, text)
    text, notes = extract_notes(text)
    text = apply_emphasis(text)
    if literals:
        text = _PLACEHOLDER_PATTERN.sub(_restore, text)
        notes = [_PLACEHOLDER_PATTERN.sub(_restore, note) for note in notes]

    return InlineText(text=text, notes=tuple(notes))
