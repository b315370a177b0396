"""
Line-oriented calculator session.

Reads one line at a time, runs it through parse and evaluate, and reports a
result or an error per line. No tree, token or lexer state outlives its line.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console

from calcline.config import CalclineConfig
from calcline.core.errors import CalcError
from calcline.core.expression_lang import evaluate, format_number, format_tree, parse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


@dataclass
class LineOutcome:
    """What one line produced: a value, or the error that aborted it."""

    source: str
    value: float | None = None
    error: CalcError | None = None
    tree_text: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Session:
    """Prompt, read, evaluate, report; until end of input."""

    def __init__(
        self,
        config: CalclineConfig | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.config = config or CalclineConfig()
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def evaluate_line(self, line: str, skip_blank: bool = True) -> LineOutcome | None:
        """Evaluate a single line. Returns None for blank lines when skip_blank is set."""
        source = line.rstrip("\r\n")
        if skip_blank and not source.strip():
            return None

        result = parse(source)
        if result.error is not None:
            logger.debug("line %r rejected: %s", source, result.error.message)
            # the partial tree is dropped with the result
            return LineOutcome(source=source, error=result.error)

        expr = result.unwrap()
        tree_text = format_tree(expr, self.config.number_format) if self.config.show_tree else None
        value = evaluate(expr)
        logger.debug("line %r = %r", source, value)
        return LineOutcome(source=source, value=value, tree_text=tree_text)

    def report(self, outcome: LineOutcome) -> None:
        """Print a result to stdout or an error to stderr."""
        if outcome.error is not None:
            self.error(outcome.error.message)
            return
        if outcome.tree_text is not None:
            self.console.print(outcome.tree_text, markup=False, soft_wrap=True)
        if outcome.value is None:
            raise AssertionError("successful outcome without a value")
        text = format_number(outcome.value, self.config.number_format)
        self.console.print(text, markup=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(f"error: {message}", markup=False, soft_wrap=True)

    def run(self, stream: TextIO, interactive: bool | None = None) -> int:
        """
        Run the loop over a text stream.

        Args:
            stream: Source of input lines (stdin in normal use).
            interactive: Show a prompt before each line. Defaults to whether
                the stream is a terminal.

        Returns:
            Process exit code: 0 at end of input, 1 if input could not be read.
        """
        if interactive is None:
            interactive = _isatty(stream)
        if interactive:
            _enable_line_editing()

        while True:
            try:
                line = self._read_line(stream, interactive)
            except OSError as e:
                self.error(f"failed to read input: {e}")
                return EXIT_INPUT_ERROR

            if line is None:
                if interactive:
                    self.console.print()
                return EXIT_OK

            if len(line.rstrip("\r\n")) > self.config.max_line_length:
                self.error(
                    "failed to read input: input was too long and got cut off "
                    "(consider increasing max_line_length)"
                )
                return EXIT_INPUT_ERROR

            outcome = self.evaluate_line(line)
            if outcome is not None:
                self.report(outcome)

    def _read_line(self, stream: TextIO, interactive: bool) -> str | None:
        if interactive and stream is sys.stdin:
            # input() goes through readline when it is loaded
            try:
                return self.console.input(self.config.prompt, markup=False) + "\n"
            except EOFError:
                return None
        if interactive:
            self.console.print(self.config.prompt, markup=False, end="")
        line = stream.readline()
        return line if line else None


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _enable_line_editing() -> None:
    """Turn on history and line editing for input() where the platform has it."""
    try:
        import readline  # noqa: F401 - importing installs the input() hook
    except ImportError:
        logger.debug("readline unavailable; line editing disabled")
