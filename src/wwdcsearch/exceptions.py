"""Custom exception hierarchy for wwdcsearch with helpful error messages."""

from __future__ import annotations

from typing import Any


class WWDCSearchError(Exception):
    """Base exception with helpful formatting for all wwdcsearch errors.

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


class ConfigurationError(WWDCSearchError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ValidationError(WWDCSearchError):
    """Input validation errors with details about what was expected."""

    pass


class InvalidTimestampError(ValidationError):
    """Timestamp that is neither MM:SS nor HH:MM:SS."""

    def __init__(self, value: object) -> None:
        """Initialize timestamp error.

        Args:
            value: The offending timestamp value
        """
        self.value = value
        super().__init__(
            message=f"Invalid timestamp: {value!r}",
            hint="Timestamps must be formatted as MM:SS or HH:MM:SS",
            details={"value": value},
        )


class CorpusError(WWDCSearchError):
    """Corpus file errors including unreadable files and invalid records."""

    pass
