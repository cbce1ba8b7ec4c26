"""Line classifier for the body of a Fountain script."""

from __future__ import annotations

from collections.abc import Sequence

from fountainpress.parser.emphasis import strip_boneyard
from fountainpress.parser.lines import Line, LineCursor
from fountainpress.parser.models import Element
from fountainpress.parser.rules import (
    RULES,
    ClassifierState,
    LineKind,
    Rule,
    Step,
    flush_action,
)


def _clean(line: Line | None) -> str | None:
    """Trimmed line text with boneyard removed, or None past the end."""
    if line is None:
        return None
    return strip_boneyard(line.text).strip()


class LineClassifier:
    """Classify body lines into screenplay elements.

    The classifier is a fold over the lines: each step takes the current
    ``ClassifierState`` and returns the next one plus the emitted elements.
    """

    def __init__(self, rules: Sequence[Rule] = RULES) -> None:
        """Initialize the classifier.

        Args:
            rules: Rules in precedence order; the last one must accept any line
        """
        self.rules = tuple(rules)

    def rule_for(
        self, text: str, next_text: str | None, state: ClassifierState
    ) -> Rule:
        """Return the first rule that accepts ``text``."""
        for rule in self.rules:
            if rule.matches(text, next_text, state):
                return rule
        raise LookupError(f"No classification rule accepted line: {text!r}")

    def kind_of(
        self,
        text: str,
        next_text: str | None = None,
        state: ClassifierState | None = None,
    ) -> LineKind:
        """Classify a single trimmed line without building elements."""
        return self.rule_for(text, next_text, state or ClassifierState()).kind

    def step(
        self, state: ClassifierState, text: str, next_text: str | None
    ) -> Step:
        """Advance the fold by one line."""
        return self.rule_for(text, next_text, state).build(text, state)

    def classify(self, lines: Sequence[str], start: int = 0) -> list[Element]:
        """Classify ``lines[start:]`` into elements in document order.

        Args:
            lines: Source lines without terminators
            start: Index of the first body line

        Returns:
            Ordered list of elements
        """
        cursor = LineCursor(lines, start)
        state = ClassifierState()
        elements: list[Element] = []

        for line in cursor:
            text = _clean(line) or ""
            state, emitted = self.step(state, text, _clean(cursor.peek()))
            elements.extend(emitted)

        _, emitted = flush_action(state)
        elements.extend(emitted)
        return elements
