"""
calcline - interactive single-line arithmetic calculator.

Scans, parses and evaluates integer expressions over + - * / with standard
precedence and left-associativity, one line at a time.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    AllocationFailureError,
    CalcError,
    ConfigError,
    ExpectedNumberError,
    InvalidNumberError,
    ParseError,
    TrailingInputError,
)
from .core.expression_lang import evaluate, parse, parse_line

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "parse",
    "parse_line",
    "CalcError",
    "ConfigError",
    "ParseError",
    "TrailingInputError",
    "ExpectedNumberError",
    "InvalidNumberError",
    "AllocationFailureError",
]
