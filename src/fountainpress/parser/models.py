"""Data models for parsed Fountain screenplays."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, TypeAlias


class ElementType(str, Enum):
    """Kinds of element a screenplay body is made of."""

    SCENE_HEADING = "scene_heading"
    TRANSITION = "transition"
    ACTION = "action"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    CENTERED = "centered"
    PAGE_BREAK = "page_break"
    SECTION = "section"
    SYNOPSIS = "synopsis"


@dataclass(frozen=True)
class SceneHeading:
    """A scene heading such as ``INT. KITCHEN - NIGHT``.

    ``text`` holds the heading without its scene prefix or forcing dot; the
    stripped prefix is kept in ``prefix``.
    """

    text: str
    number: int | str
    prefix: str = ""
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.SCENE_HEADING

    @property
    def heading(self) -> str:
        """Full heading as written, prefix included."""
        return f"{self.prefix} {self.text}".strip()


@dataclass(frozen=True)
class Transition:
    """A cut or fade between scenes."""

    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.TRANSITION


@dataclass(frozen=True)
class Action:
    """A paragraph of scene description."""

    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.ACTION


@dataclass(frozen=True)
class Character:
    """A character cue opening a dialogue block.

    ``extension`` is the text between the first opening and the last closing
    parenthesis, so stacked extensions such as ``(V.O.) (CONT'D)`` stay
    together.
    """

    name: str
    dual: bool = False
    extension: str | None = None
    type: ClassVar[ElementType] = ElementType.CHARACTER

    @property
    def base_name(self) -> str:
        """Cue name without its extensions."""
        if self.extension is None:
            return self.name
        return self.name[: self.name.find("(")].rstrip()


@dataclass(frozen=True)
class Parenthetical:
    """A wrylie inside a dialogue block, parentheses included."""

    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.PARENTHETICAL


@dataclass(frozen=True)
class Dialogue:
    """A spoken line inside a dialogue block."""

    text: str
    dual: bool = False
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.DIALOGUE


@dataclass(frozen=True)
class Centered:
    """Centered text such as ``> THE END <``."""

    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.CENTERED


@dataclass(frozen=True)
class PageBreak:
    """An explicit page break."""

    type: ClassVar[ElementType] = ElementType.PAGE_BREAK


@dataclass(frozen=True)
class Section:
    """An outline section marker; never rendered as script text."""

    level: int
    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.SECTION


@dataclass(frozen=True)
class Synopsis:
    """An outline synopsis line."""

    text: str
    notes: tuple[str, ...] = ()
    type: ClassVar[ElementType] = ElementType.SYNOPSIS


Element: TypeAlias = (
    SceneHeading
    | Transition
    | Action
    | Character
    | Parenthetical
    | Dialogue
    | Centered
    | PageBreak
    | Section
    | Synopsis
)


def element_to_dict(element: Element) -> dict[str, Any]:
    """Convert an element to a JSON-ready dict tagged with its type."""
    data: dict[str, Any] = {"type": element.type.value}
    for f in fields(element):
        value = getattr(element, f.name)
        data[f.name] = list(value) if isinstance(value, tuple) else value
    return data


@dataclass(frozen=True)
class Document:
    """Represents a parsed screenplay: title page fields plus body elements."""

    title_fields: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    elements: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the containers handed in by the caller."""
        object.__setattr__(
            self, "title_fields", MappingProxyType(dict(self.title_fields))
        )
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def title(self) -> str | None:
        """Title page title, if any."""
        return self.title_fields.get("title")

    @property
    def scene_headings(self) -> list[SceneHeading]:
        """All scene headings in document order."""
        return [e for e in self.elements if isinstance(e, SceneHeading)]

    @property
    def characters(self) -> list[str]:
        """Unique character names, extensions dropped, in first-seen order."""
        seen: dict[str, None] = {}
        for element in self.elements:
            if isinstance(element, Character):
                seen.setdefault(element.base_name, None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        """Convert the document to plain dicts and lists."""
        return {
            "title_fields": dict(self.title_fields),
            "elements": [element_to_dict(e) for e in self.elements],
        }
