"""Rich table formatter for parsed screenplays."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fountainpress.cli.formatters.base import OutputFormat, OutputFormatter
from fountainpress.cli.formatters.json_formatter import JsonFormatter
from fountainpress.parser.models import (
    Character,
    Document,
    Element,
    PageBreak,
    SceneHeading,
    Section,
)

# Element text longer than this is cut in the table view
PREVIEW_LENGTH = 60


def describe_element(element: Element) -> str:
    """Short human-readable summary of an element's payload."""
    if isinstance(element, PageBreak):
        return ""
    if isinstance(element, SceneHeading):
        text = f"#{element.number} {element.heading}"
    elif isinstance(element, Character):
        text = f"{element.name} (dual)" if element.dual else element.name
    elif isinstance(element, Section):
        text = f"{'#' * element.level} {element.text}"
    else:
        text = element.text
    if len(text) > PREVIEW_LENGTH:
        text = text[: PREVIEW_LENGTH - 3] + "..."
    return text


class DocumentFormatter(OutputFormatter[Document]):
    """Formatter for a parsed Document."""

    def format(
        self, data: Document, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format a document as JSON or as rich tables."""
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        return self._format_table(data)

    def _format_table(self, document: Document) -> str:
        """Render title fields and elements as rich tables."""
        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=True, width=120)

        if document.title_fields:
            title_table = Table(title="Title Page", show_header=False)
            title_table.add_column("Key", style="cyan")
            title_table.add_column("Value")
            for key, value in document.title_fields.items():
                title_table.add_row(key.title(), Text(value))
            temp_console.print(title_table)

        table = Table(title="Elements", show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="green")
        table.add_column("Text", no_wrap=False)
        for position, element in enumerate(document.elements, start=1):
            table.add_row(
                str(position),
                element.type.value.replace("_", " "),
                Text(describe_element(element)),
            )
        temp_console.print(table)
        temp_console.print(
            f"{len(document.scene_headings)} scenes, "
            f"{len(document.characters)} characters"
        )
        return string_io.getvalue()
