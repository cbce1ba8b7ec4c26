"""Parse a Fountain script and show its structure."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainpress.cli.formatters.base import OutputFormat
from fountainpress.cli.formatters.document_formatter import DocumentFormatter
from fountainpress.cli.utils.cli_handler import CLIHandler, cli_command
from fountainpress.config import FountainPressSettings, get_settings_for_cli
from fountainpress.parser import Document, FountainParser

console = Console()


def load_document(
    path: Path | None, settings: FountainPressSettings, handler: CLIHandler
) -> Document:
    """Parse ``path``, or stdin when no path is given."""
    parser = FountainParser()
    if path is not None:
        return parser.parse_file(path, encoding=settings.input_encoding)
    return parser.parse(handler.read_stdin())


@cli_command
def parse_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Fountain file to parse (default: read from stdin)",
            dir_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the document as JSON")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Parse a Fountain script and list its title page and elements."""
    handler = CLIHandler(console)
    settings = get_settings_for_cli(config_file=config)
    document = load_document(path, settings, handler)

    formatter = DocumentFormatter(console)
    if json_output:
        # Pure JSON without ANSI escape codes
        print(formatter.format(document, OutputFormat.JSON))
    else:
        console.print(
            formatter.format(document, OutputFormat.TABLE),
            end="",
            markup=False,
            highlight=False,
        )
