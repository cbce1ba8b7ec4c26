"""Fountain screenplay parser."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

from fountainpress.config import get_logger, get_settings
from fountainpress.exceptions import (
    FountainPressFileNotFoundError,
    InvalidInputError,
    ParseError,
)
from fountainpress.parser.classifier import LineClassifier
from fountainpress.parser.emphasis import strip_boneyard
from fountainpress.parser.lines import split_lines
from fountainpress.parser.models import Document
from fountainpress.parser.title_page import extract_title_page

logger = get_logger(__name__)


class FountainParser:
    """Parse Fountain screenplay markup into a Document.

    A parser holds no per-parse state, so one instance can be shared across
    threads.
    """

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        """Initialize the fountain parser.

        Args:
            classifier: Line classifier to use for the script body
        """
        self.classifier = classifier or LineClassifier()

    def parse(self, content: Any) -> Document:
        """Parse Fountain content into a Document.

        Args:
            content: Raw Fountain text

        Returns:
            Parsed Document with title fields and body elements

        Raises:
            InvalidInputError: If content is None or not a string
        """
        if not isinstance(content, str):
            raise InvalidInputError(content)

        # Boneyard may span lines, so it goes before the text is split
        lines = split_lines(strip_boneyard(content))

        title_page = extract_title_page(lines)
        elements = self.classifier.classify(lines, start=title_page.cursor)
        document = Document(title_fields=title_page.fields, elements=elements)

        counts = Counter(element.type.value for element in document.elements)
        logger.debug(
            "Parsed fountain document",
            lines=len(lines),
            body_start=title_page.cursor,
            title_keys=sorted(document.title_fields),
            scenes=len(document.scene_headings),
            element_counts=dict(counts),
        )
        return document

    def parse_file(
        self, file_path: Path | str, encoding: str | None = None
    ) -> Document:
        """Parse a Fountain file.

        Args:
            file_path: Path to the Fountain file
            encoding: Text encoding; defaults to the configured input encoding

        Returns:
            Parsed Document

        Raises:
            FountainPressFileNotFoundError: If the file does not exist
            ParseError: If the file cannot be decoded
        """
        path = Path(file_path)
        if not path.is_file():
            raise FountainPressFileNotFoundError(
                message=f"Fountain file not found: {path}",
                hint="Check the path and that the file is readable.",
                details={"file": str(path), "current_dir": str(Path.cwd())},
            )

        if encoding is None:
            encoding = get_settings().input_encoding

        logger.debug("Parsing fountain file", file=str(path), encoding=encoding)
        try:
            content = path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            logger.error(
                "Failed to decode fountain file", file=str(path), error=str(e)
            )
            raise ParseError(
                message=f"Failed to decode Fountain file: {path}",
                hint="Convert the file to plain text or pass the right encoding.",
                details={"file": str(path), "encoding": encoding, "error": str(e)},
            ) from e

        return self.parse(content)


def parse(content: str) -> Document:
    """Parse Fountain text with a default parser."""
    return FountainParser().parse(content)
