"""
Tokenizer for calcline expressions.

Scans one input line lazily, one token per call, borrowing spans of the
caller's string rather than copying text.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Anything the scanner does not recognise
    INVALID = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token: its kind and the span of the source it covers."""

    __slots__ = ("kind", "source", "start", "length")

    def __init__(self, kind: TokenKind, source: str, start: int, length: int) -> None:
        self.kind = kind
        self.source = source
        self.start = start
        self.length = length

    @property
    def text(self) -> str:
        return self.source[self.start : self.start + self.length]

    @property
    def end(self) -> int:
        return self.start + self.length

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.start})"


_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

_LEADING_DIGITS = "123456789"
_DIGITS = "0123456789"


class Lexer:
    """Cursor over one input line. Advances monotonically, never rewinds."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def next_token(self) -> Token:
        """Scan and return the next token, advancing the cursor past it."""
        source = self.source
        n = len(source)

        while self.pos < n and source[self.pos].isspace():
            self.pos += 1

        start = self.pos
        if start >= n:
            return Token(TokenKind.EOF, source, n, 0)

        c = source[start]

        kind = _OPERATORS.get(c)
        if kind is not None:
            self.pos += 1
            return Token(kind, source, start, 1)

        # Zero is a number on its own; it never starts a longer run
        if c == "0":
            self.pos += 1
            return Token(TokenKind.NUMBER, source, start, 1)

        if c in _LEADING_DIGITS:
            self.pos += 1
            while self.pos < n and source[self.pos] in _DIGITS:
                self.pos += 1
            return Token(TokenKind.NUMBER, source, start, self.pos - start)

        self.pos += 1
        return Token(TokenKind.INVALID, source, start, 1)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize an expression string, ending with an EOF token."""
    return iter(Lexer(source))
