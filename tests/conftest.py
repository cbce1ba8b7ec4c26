"""Pytest configuration and fixtures."""

import re

import pytest
from typer.testing import CliRunner, Result

from fountainpress.config import (
    FountainPressSettings,
    configure_logging,
    reset_settings,
    set_settings,
)
from fountainpress.parser import FountainParser


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Give every test default settings, free of user config and env vars."""
    for key in (
        "FOUNTAINPRESS_LOG_LEVEL",
        "FOUNTAINPRESS_LOG_FORMAT",
        "FOUNTAINPRESS_LOG_FILE",
        "FOUNTAINPRESS_DEBUG",
        "FOUNTAINPRESS_INPUT_ENCODING",
        "FOUNTAINPRESS_HTML_INCLUDE_TITLE_PAGE",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    set_settings(FountainPressSettings())
    yield
    reset_settings()
    # Commands may have pointed the handlers at a CliRunner stream
    configure_logging(FountainPressSettings())


@pytest.fixture
def parser():
    """Create a fresh parser instance for each test."""
    return FountainParser()


@pytest.fixture
def sample_fountain_content():
    """A short script touching most element kinds."""
    return """\
Title: Test Script
Author: Test Author
Draft date: 1 May 2024

FADE IN:

EXT. COFFEE SHOP - DAY

A busy coffee shop on a sunny morning.
ALICE (30s, determined) sits at a table.

ALICE
(muttering to herself)
This code has to work.

BARISTA approaches with a steaming cup.

BARISTA
One large coffee for the lady?

CUT TO:

INT. ALICE'S APARTMENT - NIGHT #7#

Alice reviews her work on *multiple* monitors.

ALICE
Finally! It's **working**!

BOB ^
It really is.

===

> THE END <
"""


def strip_ansi_codes(text: str) -> str:
    """Strip ANSI escape sequences from text."""
    return re.sub(r"\x1b\[[0-9;]*[A-Za-z]", "", text)


class CleanResult:
    """A wrapper around CliRunner Result that strips ANSI codes."""

    def __init__(self, result: Result):
        """Initialize with a CliRunner result."""
        self._result = result

    @property
    def exit_code(self) -> int:
        """Return the exit code from the wrapped result."""
        return self._result.exit_code

    @property
    def output(self) -> str:
        """Return the cleaned output."""
        return strip_ansi_codes(self._result.output)

    @property
    def stdout(self) -> str:
        """Return the cleaned stdout."""
        return strip_ansi_codes(self._result.stdout)


@pytest.fixture
def cli_invoke():
    """Invoke the fountainpress CLI and return a CleanResult."""
    from fountainpress.cli.main import app

    runner = CliRunner()

    def invoke(*args, **kwargs) -> CleanResult:
        return CleanResult(runner.invoke(app, list(args), **kwargs))

    return invoke
