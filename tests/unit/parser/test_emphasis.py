"""Tests for inline markup resolution."""

import pytest

from fountainpress.parser.emphasis import (
    NOTE_MARKER,
    InlineText,
    apply_emphasis,
    extract_notes,
    resolve_inline,
    strip_boneyard,
)


class TestStripBoneyard:
    """Test boneyard removal."""

    def test_inline_span(self):
        """A boneyard span disappears completely."""
        assert strip_boneyard("/* cut */Remaining text") == "Remaining text"

    def test_multiline_span(self):
        """Boneyard spans may cross lines."""
        assert strip_boneyard("a/* one\ntwo */b") == "ab"

    def test_non_greedy(self):
        """Each span closes at its first terminator."""
        assert strip_boneyard("/* a */keep/* b */") == "keep"

    def test_unterminated(self):
        """An unterminated opener is left alone."""
        assert strip_boneyard("/* open") == "/* open"


class TestNotes:
    """Test note extraction."""

    def test_note_becomes_marker(self):
        """Notes are replaced by the marker and kept in order."""
        text, notes = extract_notes("Hi [[one]] there [[ two ]]")
        assert text == f"Hi {NOTE_MARKER} there {NOTE_MARKER}"
        assert notes == ["one", "two"]

    def test_note_is_not_visible_text(self):
        """The resolved text keeps only the marker."""
        resolved = resolve_inline("He waits. [[check timing]]")
        assert resolved == InlineText(
            text=f"He waits. {NOTE_MARKER}", notes=("check timing",)
        )


class TestEmphasis:
    """Test emphasis spans."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("*italic* and **bold**", "<i>italic</i> and <b>bold</b>"),
            ("***both***", "<b><i>both</i></b>"),
            ("_under_", "<u>under</u>"),
            ("**a** **b**", "<b>a</b> <b>b</b>"),
            ("*unclosed", "*unclosed"),
            ("**", "**"),
            ("plain text", "plain text"),
            ("_*mixed*_", "<u><i>mixed</i></u>"),
        ],
    )
    def test_spans(self, source, expected):
        """Markers become tags, longest marker first."""
        assert apply_emphasis(source) == expected


class TestResolveInline:
    """Test the full resolution pipeline."""

    def test_escaped_asterisks_stay_literal(self):
        """Escaped markers never open or close a span."""
        assert resolve_inline(r"\*not italic\*").text == "*not italic*"

    def test_escape_inside_span(self):
        """An escaped marker inside a span is kept as text."""
        assert resolve_inline(r"*a\*b*").text == "<i>a*b</i>"

    def test_escaped_underscores(self):
        """Escapes and real spans can share a line."""
        assert resolve_inline(r"a \_b\_ _c_").text == "a _b_ <u>c</u>"

    def test_escaped_note_stays_literal(self):
        """An escaped bracket never opens a note."""
        resolved = resolve_inline(r"Keep \[[this]] literal")
        assert resolved == InlineText(text="Keep [[this]] literal")

    def test_escape_inside_note(self):
        """Escapes inside a note are restored in the note text."""
        resolved = resolve_inline(r"Run. [[check \*this\*]]")
        assert resolved == InlineText(
            text=f"Run. {NOTE_MARKER}", notes=("check *this*",)
        )

    def test_escaped_backslash(self):
        """A doubled backslash yields one backslash."""
        assert resolve_inline("a\\\\b").text == "a\\b"

    def test_boneyard_removed_first(self):
        """Boneyard content never reaches the emphasis step."""
        assert resolve_inline("*keep*/* *gone* */").text == "<i>keep</i>"

    def test_no_notes_by_default(self):
        """Plain prose carries no notes."""
        assert resolve_inline("Jane enters.") == InlineText("Jane enters.")
