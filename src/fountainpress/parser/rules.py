"""Ordered line classification rules for the Fountain body.

Each rule pairs a predicate with a builder. Rules are tried in the order of
``RULES``; the first predicate that accepts a line decides its kind. Builders
never mutate state: they take a ``ClassifierState`` and return the next one
together with the elements to emit.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeAlias

from fountainpress.parser.emphasis import resolve_inline
from fountainpress.parser.models import (
    Action,
    Centered,
    Character,
    Dialogue,
    Element,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Section,
    Synopsis,
    Transition,
)

PAGE_BREAK_PATTERN = re.compile(r"^={3,}$")
SECTION_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
SYNOPSIS_PATTERN = re.compile(r"^=\s+(.+)$")
CENTERED_PATTERN = re.compile(r"^>\s*(.*?)\s*<$")
FORCED_SCENE_PATTERN = re.compile(r"^\.(?!\.)")
SCENE_PREFIX_PATTERN = re.compile(
    r"^(?P<prefix>(?:INT\./EXT|INT/EXT|I/E|INT|EXT|EST)(?:\.|(?=\s)))",
    re.IGNORECASE,
)
SCENE_NUMBER_PATTERN = re.compile(r"\s*#([\w.\-]+)#$")
FORCED_TRANSITION_PATTERN = re.compile(r"^>")
TRANSITION_PATTERN = re.compile(
    r"(?:TO:|FADE IN:|FADE OUT\.|FADE TO BLACK\.|CUT TO BLACK\.)$"
)
CHARACTER_PATTERN = re.compile(
    r"^[A-Z0-9][A-Z0-9 _.'\-]*?(?:\s*\((?P<extension>.*)\))?$"
)
DUAL_DIALOGUE_MARKER = "^"
FORCED_ACTION_MARKER = "!"


class LineKind(str, Enum):
    """What a body line was classified as."""

    BLANK = "blank"
    PAGE_BREAK = "page_break"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    CENTERED = "centered"
    SCENE_HEADING = "scene_heading"
    TRANSITION = "transition"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    ACTION = "action"


@dataclass(frozen=True)
class ClassifierState:
    """State carried from one line to the next."""

    dialogue_open: bool = False
    dual: bool = False
    action_buffer: tuple[str, ...] = ()
    scene_counter: int = 0


Step: TypeAlias = tuple[ClassifierState, tuple[Element, ...]]
Predicate: TypeAlias = Callable[[str, str | None, ClassifierState], bool]
Builder: TypeAlias = Callable[[str, ClassifierState], Step]


@dataclass(frozen=True)
class Rule:
    """A predicate and the builder that runs when it matches."""

    kind: LineKind
    matches: Predicate
    build: Builder


def is_scene_heading(text: str) -> bool:
    """Check whether a trimmed line reads as a scene heading."""
    return bool(
        FORCED_SCENE_PATTERN.match(text) or SCENE_PREFIX_PATTERN.match(text)
    )


def split_character_cue(text: str) -> tuple[str, bool, str | None] | None:
    """Split a character cue into (name, dual, extension).

    Returns:
        None when the line does not look like a cue
    """
    dual = text.endswith(DUAL_DIALOGUE_MARKER)
    name = text[: -len(DUAL_DIALOGUE_MARKER)].rstrip() if dual else text
    match = CHARACTER_PATTERN.match(name)
    if match is None:
        return None
    extension = match.group("extension")
    return name, dual, extension.strip() if extension is not None else None


def is_wrapped_in_parentheses(text: str) -> bool:
    """True when the opening parenthesis is closed by the final character."""
    if not (text.startswith("(") and text.endswith(")")):
        return False
    depth = 0
    for position, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return position == len(text) - 1
    return False


def flush_action(state: ClassifierState) -> Step:
    """Turn the pending action lines into a single Action element."""
    if not state.action_buffer:
        return state, ()
    resolved = [resolve_inline(text) for text in state.action_buffer]
    text = " ".join(part.text for part in resolved).strip()
    notes = tuple(note for part in resolved for note in part.notes)
    flushed = replace(state, action_buffer=())
    if not text:
        return flushed, ()
    return flushed, (Action(text=text, notes=notes),)


def _close_block(state: ClassifierState, *elements: Element) -> Step:
    """Flush pending action, emit elements and close any dialogue block."""
    state, flushed = flush_action(state)
    return replace(state, dialogue_open=False, dual=False), flushed + elements


# Predicates


def _blank(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return not text


def _page_break(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return bool(PAGE_BREAK_PATTERN.match(text))


def _section(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return bool(SECTION_PATTERN.match(text))


def _synopsis(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return bool(SYNOPSIS_PATTERN.match(text))


def _centered(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return bool(CENTERED_PATTERN.match(text))


def _scene_heading(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return is_scene_heading(text)


def _transition(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return bool(
        FORCED_TRANSITION_PATTERN.match(text) or TRANSITION_PATTERN.search(text)
    )


def _character(text: str, next_text: str | None, state: ClassifierState) -> bool:
    if state.dialogue_open or split_character_cue(text) is None:
        return False
    # A cue needs something to say on the very next line
    return bool(next_text) and not is_scene_heading(next_text or "")


def _dialogue(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return state.dialogue_open


def _action(text: str, next_text: str | None, state: ClassifierState) -> bool:
    return True


# Builders


def _build_blank(text: str, state: ClassifierState) -> Step:
    return _close_block(state)


def _build_page_break(text: str, state: ClassifierState) -> Step:
    return _close_block(state, PageBreak())


def _build_section(text: str, state: ClassifierState) -> Step:
    match = SECTION_PATTERN.match(text)
    assert match is not None
    resolved = resolve_inline(match.group(2).strip())
    section = Section(
        level=len(match.group(1)), text=resolved.text, notes=resolved.notes
    )
    return _close_block(state, section)


def _build_synopsis(text: str, state: ClassifierState) -> Step:
    match = SYNOPSIS_PATTERN.match(text)
    assert match is not None
    resolved = resolve_inline(match.group(1).strip())
    return _close_block(state, Synopsis(text=resolved.text, notes=resolved.notes))


def _build_centered(text: str, state: ClassifierState) -> Step:
    match = CENTERED_PATTERN.match(text)
    assert match is not None
    resolved = resolve_inline(match.group(1))
    return _close_block(state, Centered(text=resolved.text, notes=resolved.notes))


def _build_scene_heading(text: str, state: ClassifierState) -> Step:
    counter = state.scene_counter + 1
    number: int | str = counter

    prefix = ""
    if FORCED_SCENE_PATTERN.match(text):
        body = text[1:]
    else:
        prefix_match = SCENE_PREFIX_PATTERN.match(text)
        assert prefix_match is not None
        prefix = prefix_match.group("prefix")
        body = text[prefix_match.end() :]

    number_match = SCENE_NUMBER_PATTERN.search(body)
    if number_match:
        explicit = number_match.group(1)
        number = int(explicit) if explicit.isdecimal() else explicit
        body = body[: number_match.start()]

    resolved = resolve_inline(body.strip())
    heading = SceneHeading(
        text=resolved.text, number=number, prefix=prefix, notes=resolved.notes
    )
    return _close_block(replace(state, scene_counter=counter), heading)


def _build_transition(text: str, state: ClassifierState) -> Step:
    if FORCED_TRANSITION_PATTERN.match(text):
        text = text[1:].strip()
    resolved = resolve_inline(text)
    return _close_block(state, Transition(text=resolved.text, notes=resolved.notes))


def _build_character(text: str, state: ClassifierState) -> Step:
    cue = split_character_cue(text)
    assert cue is not None
    name, dual, extension = cue
    state, flushed = flush_action(state)
    character = Character(name=name, dual=dual, extension=extension)
    return replace(state, dialogue_open=True, dual=dual), (*flushed, character)


def _build_dialogue(text: str, state: ClassifierState) -> Step:
    resolved = resolve_inline(text)
    element: Element
    if is_wrapped_in_parentheses(text):
        element = Parenthetical(text=resolved.text, notes=resolved.notes)
    else:
        element = Dialogue(text=resolved.text, dual=state.dual, notes=resolved.notes)
    return state, (element,)


def _build_action(text: str, state: ClassifierState) -> Step:
    if not text.startswith(FORCED_ACTION_MARKER):
        return replace(state, action_buffer=(*state.action_buffer, text)), ()

    state, flushed = flush_action(state)
    resolved = resolve_inline(text[len(FORCED_ACTION_MARKER) :].strip())
    if not resolved.text:
        return state, flushed
    return state, (*flushed, Action(text=resolved.text, notes=resolved.notes))


RULES: tuple[Rule, ...] = (
    Rule(LineKind.BLANK, _blank, _build_blank),
    Rule(LineKind.PAGE_BREAK, _page_break, _build_page_break),
    Rule(LineKind.SECTION, _section, _build_section),
    Rule(LineKind.SYNOPSIS, _synopsis, _build_synopsis),
    Rule(LineKind.CENTERED, _centered, _build_centered),
    Rule(LineKind.SCENE_HEADING, _scene_heading, _build_scene_heading),
    Rule(LineKind.TRANSITION, _transition, _build_transition),
    Rule(LineKind.CHARACTER, _character, _build_character),
    Rule(LineKind.DIALOGUE, _dialogue, _build_dialogue),
    Rule(LineKind.ACTION, _action, _build_action),
)
