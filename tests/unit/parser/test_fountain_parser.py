"""Tests for the Fountain parser facade."""

from dataclasses import FrozenInstanceError

import pytest

from fountainpress import parse
from fountainpress.config import FountainPressSettings, set_settings
from fountainpress.exceptions import (
    FountainPressFileNotFoundError,
    InvalidInputError,
    ParseError,
)
from fountainpress.parser import (
    Action,
    Centered,
    Character,
    Dialogue,
    Document,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Transition,
)


class TestFountainParser:
    """Test parsing whole scripts."""

    def test_title_page_and_scene(self, parser):
        """Title fields are split from the body."""
        doc = parser.parse(
            "Title: ALPHA\nAuthor: Jane\n\nINT. ROOM - DAY\nJane enters."
        )
        assert dict(doc.title_fields) == {"title": "ALPHA", "author": "Jane"}
        assert doc.elements == (
            SceneHeading(text="ROOM - DAY", number=1, prefix="INT."),
            Action(text="Jane enters."),
        )

    def test_character_and_dialogue(self, parser):
        """A cue and its line."""
        doc = parser.parse("JANE\nHello there!")
        assert dict(doc.title_fields) == {}
        assert doc.elements == (
            Character(name="JANE"),
            Dialogue(text="Hello there!"),
        )

    def test_parenthetical(self, parser):
        """A wrylie between cue and dialogue."""
        doc = parser.parse("JANE\n(softly)\nHello.")
        assert doc.elements == (
            Character(name="JANE"),
            Parenthetical(text="(softly)"),
            Dialogue(text="Hello."),
        )

    def test_cue_with_stacked_extensions(self, parser):
        """Stacked extensions keep a cue and its line as dialogue."""
        doc = parser.parse("JANE (V.O.) (CONT'D)\nStill here.")
        assert [element.type.value for element in doc.elements] == [
            "character",
            "dialogue",
        ]
        assert doc.characters == ["JANE"]

    def test_escaped_note(self, parser):
        """Escaped note brackets stay in the visible text."""
        doc = parser.parse(r"Keep \[[this]] literal")
        assert doc.elements == (Action(text="Keep [[this]] literal"),)

    def test_emphasis(self, parser):
        """Emphasis markers become tags."""
        doc = parser.parse("*italic* and **bold**")
        assert doc.elements == (Action(text="<i>italic</i> and <b>bold</b>"),)

    def test_boneyard(self, parser):
        """Boneyard content is dropped before classification."""
        doc = parser.parse("/* cut */Remaining text")
        assert doc.elements == (Action(text="Remaining text"),)

    def test_multiline_boneyard(self, parser):
        """Boneyard spanning lines removes every line it covers."""
        doc = parser.parse("Walk in.\n/* old\nstuff */\nRun.")
        assert doc.elements == (Action(text="Walk in."), Action(text="Run."))

    def test_boneyard_in_title_page(self, parser):
        """Boneyard is gone before the title page is read."""
        doc = parser.parse("/* draft */Title: X\n\nWalk.")
        assert dict(doc.title_fields) == {"title": "X"}

    def test_centered_with_unicode_whitespace(self, parser):
        """Non-breaking spaces count as whitespace."""
        doc = parser.parse(">\u00a0THE END\u00a0<")
        assert doc.elements == (Centered(text="THE END"),)

    def test_crlf_line_endings(self, parser):
        """Windows line endings parse like Unix ones."""
        assert parser.parse("JANE\r\nHello there!") == parser.parse(
            "JANE\nHello there!"
        )

    def test_empty_input(self, parser):
        """Empty text gives an empty document."""
        doc = parser.parse("")
        assert doc == Document()
        assert doc.title is None

    def test_full_script(self, parser, sample_fountain_content):
        """A complete script yields every element in order."""
        doc = parser.parse(sample_fountain_content)

        assert dict(doc.title_fields) == {
            "title": "Test Script",
            "author": "Test Author",
            "draft date": "1 May 2024",
        }
        assert doc.elements == (
            Transition(text="FADE IN:"),
            SceneHeading(text="COFFEE SHOP - DAY", number=1, prefix="EXT."),
            Action(
                text="A busy coffee shop on a sunny morning. "
                "ALICE (30s, determined) sits at a table."
            ),
            Character(name="ALICE"),
            Parenthetical(text="(muttering to herself)"),
            Dialogue(text="This code has to work."),
            Action(text="BARISTA approaches with a steaming cup."),
            Character(name="BARISTA"),
            Dialogue(text="One large coffee for the lady?"),
            Transition(text="CUT TO:"),
            SceneHeading(text="ALICE'S APARTMENT - NIGHT", number=7, prefix="INT."),
            Action(text="Alice reviews her work on <i>multiple</i> monitors."),
            Character(name="ALICE"),
            Dialogue(text="Finally! It's <b>working</b>!"),
            Character(name="BOB", dual=True),
            Dialogue(text="It really is.", dual=True),
            PageBreak(),
            Centered(text="THE END"),
        )
        assert doc.characters == ["ALICE", "BARISTA", "BOB"]

    @pytest.mark.parametrize("content", [None, b"JANE\nHi", 42, ["JANE"]])
    def test_invalid_input(self, parser, content):
        """Anything but a string is rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            parser.parse(content)
        assert exc_info.value.received_type == type(content).__name__

    def test_module_level_parse(self):
        """The convenience function uses a default parser."""
        assert parse("JANE\nHi.").elements == (
            Character(name="JANE"),
            Dialogue(text="Hi."),
        )

    def test_document_is_immutable(self, parser):
        """Documents and their fields cannot be changed after parsing."""
        doc = parser.parse("Title: X\n\nWalk.")
        with pytest.raises(TypeError):
            doc.title_fields["title"] = "Y"  # type: ignore[index]
        with pytest.raises(FrozenInstanceError):
            doc.elements = ()  # type: ignore[misc]

    def test_parser_is_reusable(self, parser):
        """Parsing twice with one parser gives equal documents."""
        assert parser.parse("INT. A\n\nINT. B") == parser.parse("INT. A\n\nINT. B")


class TestParseFile:
    """Test reading scripts from disk."""

    def test_parse_file(self, parser, tmp_path, sample_fountain_content):
        """A file on disk parses like its text."""
        script = tmp_path / "script.fountain"
        script.write_text(sample_fountain_content, encoding="utf-8")
        assert parser.parse_file(script) == parser.parse(sample_fountain_content)

    def test_missing_file(self, parser, tmp_path):
        """A missing file raises with the path in the details."""
        missing = tmp_path / "missing.fountain"
        with pytest.raises(FountainPressFileNotFoundError) as exc_info:
            parser.parse_file(missing)
        assert exc_info.value.details["file"] == str(missing)

    def test_directory_is_not_a_file(self, parser, tmp_path):
        """Directories are rejected like missing files."""
        with pytest.raises(FountainPressFileNotFoundError):
            parser.parse_file(tmp_path)

    def test_undecodable_file(self, parser, tmp_path):
        """Bytes that do not decode raise ParseError."""
        script = tmp_path / "binary.fountain"
        script.write_bytes(b"JANE\n\xff\xfe\xfa")
        with pytest.raises(ParseError) as exc_info:
            parser.parse_file(script)
        assert exc_info.value.details["encoding"] == "utf-8"

    def test_configured_encoding(self, parser, tmp_path):
        """The configured input encoding is used when none is passed."""
        script = tmp_path / "latin.fountain"
        script.write_bytes("Title: Café\n\nWalk.".encode("latin-1"))
        set_settings(FountainPressSettings(input_encoding="latin-1"))
        assert parser.parse_file(script).title == "Café"

    def test_explicit_encoding(self, parser, tmp_path):
        """An explicit encoding wins over the settings."""
        script = tmp_path / "latin.fountain"
        script.write_bytes("Title: Café".encode("latin-1"))
        assert parser.parse_file(script, encoding="latin-1").title == "Café"
