"""Fountain screenplay format parser for fountainpress."""

from __future__ import annotations

from .classifier import LineClassifier
from .emphasis import InlineText, resolve_inline
from .fountain_parser import FountainParser, parse
from .models import (
    Action,
    Centered,
    Character,
    Dialogue,
    Document,
    Element,
    ElementType,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Section,
    Synopsis,
    Transition,
)
from .rules import ClassifierState, LineKind
from .title_page import TitleField, TitlePage, extract_title_page

__all__ = [
    "Action",
    "Centered",
    "Character",
    "ClassifierState",
    "Dialogue",
    "Document",
    "Element",
    "ElementType",
    "FountainParser",
    "InlineText",
    "LineClassifier",
    "LineKind",
    "PageBreak",
    "Parenthetical",
    "SceneHeading",
    "Section",
    "Synopsis",
    "TitleField",
    "TitlePage",
    "Transition",
    "extract_title_page",
    "parse",
    "resolve_inline",
]
