"""Custom exception hierarchy for fountainpress with helpful error messages."""

from __future__ import annotations

from typing import Any


class FountainPressError(Exception):
    """Base exception with helpful formatting for all fountainpress errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(FountainPressError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class InvalidInputError(FountainPressError):
    """Parser called without a usable text buffer."""

    def __init__(self, received: Any) -> None:
        """Initialize invalid input error.

        Args:
            received: The value that was passed instead of a string
        """
        self.received_type = type(received).__name__
        super().__init__(
            message="Screenplay source must be a string",
            hint="Decode the document to text before parsing it",
            details={"received_type": self.received_type},
        )


class ParseError(FountainPressError):
    """Fountain file errors raised before classification can start."""

    pass


class FountainPressFileNotFoundError(FountainPressError):
    """File not found errors with helpful path information."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "encoding": "input_encoding",
        "level": "log_level",
        "format": "log_format",
        "title_page": "html_include_title_page",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
