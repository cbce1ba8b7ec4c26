"""Output formatters for the fountainpress CLI."""

from __future__ import annotations

from fountainpress.cli.formatters.base import OutputFormat, OutputFormatter
from fountainpress.cli.formatters.document_formatter import DocumentFormatter
from fountainpress.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "DocumentFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
]
