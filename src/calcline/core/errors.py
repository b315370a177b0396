"""
Error types for calcline expression parsing and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class CalcError(Exception):
    """Base exception for all calcline errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseErrorKind(StrEnum):
    """The ways a single line can fail to parse."""

    TRAILING_INPUT = "trailing_input"
    EXPECTED_NUMBER = "expected_number"
    INVALID_NUMBER = "invalid_number"
    ALLOCATION_FAILURE = "allocation_failure"


class ParseError(CalcError):
    """
    Raised when an input line cannot be parsed into an expression.

    Only aborts the current line; a session continues with the next one.
    """

    kind: ParseErrorKind
    default_message = "parse error"

    def __init__(
        self,
        message: str | None = None,
        pos: int = 0,
        context: Optional["ErrorContext"] = None,
    ):
        self.pos = pos
        super().__init__(message or self.default_message, context)


class TrailingInputError(ParseError):
    """Extra tokens after a complete expression, e.g. ``1+2 3``."""

    kind = ParseErrorKind.TRAILING_INPUT
    default_message = "invalid expression"


class ExpectedNumberError(ParseError):
    """A number was required but a different token was seen."""

    kind = ParseErrorKind.EXPECTED_NUMBER
    default_message = "expected number"


class InvalidNumberError(ParseError):
    """Token text could not be fully converted to a float."""

    kind = ParseErrorKind.INVALID_NUMBER
    default_message = "invalid number"


class AllocationFailureError(ParseError):
    """Node construction failed (resource exhaustion)."""

    kind = ParseErrorKind.ALLOCATION_FAILURE
    default_message = "failed to allocate memory"


class ConfigError(CalcError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - Missing explicit config file
    - Malformed TOML
    - Unknown or mistyped settings
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error within a single input line.

    Attributes:
        source: The input line being parsed
        column: Column number (1-indexed)
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            A location line followed by the source and a caret marker.
        """
        return f"column {self.column}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the source line with an error marker under the column."""
        prefix = "   | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.source}\n{marker}"


def make_parse_error(
    error_type: type[ParseError],
    source: str,
    pos: int,
    message: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        error_type: Concrete ParseError subclass to instantiate
        source: The line being parsed
        pos: Offset of the offending token (0-indexed)
        message: Optional override of the default message

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(source=source, column=pos + 1)
    return error_type(message, pos=pos, context=context)
