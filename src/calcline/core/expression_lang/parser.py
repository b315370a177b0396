"""
Recursive descent parser for calcline expressions.

Grammar (precedence low to high, all operators left-associative):
    start   → expr EOF
    expr    → term (("+"|"-") term)*
    term    → number (("*"|"/") number)*
    number  → NUMBER

The parser never raises for bad input. It records the first error it meets,
keeps going where it can, and hands back whatever tree it managed to build
alongside that error so the caller decides what to do with both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from calcline.core.errors import (
    AllocationFailureError,
    ExpectedNumberError,
    InvalidNumberError,
    ParseError,
    TrailingInputError,
    make_parse_error,
)
from calcline.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from calcline.core.ir.expressions import BinaryExpr, BinaryOp, Expr, NumberLiteral

logger = logging.getLogger(__name__)

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


@dataclass
class ParseResult:
    """Outcome of parsing one line: a (possibly partial) tree and the first error."""

    expr: Expr | None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.expr is not None

    def unwrap(self) -> Expr:
        """Return the tree, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        if self.expr is None:
            raise AssertionError("parse produced neither a tree nor an error")
        return self.expr


class _Parser:
    """Recursive descent parser with a single token of lookahead."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.source = lexer.source
        self.current: Token = lexer.next_token()
        self.error: ParseError | None = None

    def advance(self) -> Token:
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    def fail(self, error_type: type[ParseError], tok: Token) -> None:
        """Record an error unless one is already set. First error wins."""
        if self.error is not None:
            return
        self.error = make_parse_error(error_type, self.source, tok.start)
        logger.debug("parse error at %d in %r: %s", tok.start, self.source, self.error.message)

    # -- Grammar rules --

    def parse_start(self) -> Expr | None:
        """expr EOF"""
        root = self.parse_expr()
        if self.current.kind != TokenKind.EOF:
            self.fail(TrailingInputError, self.current)
        return root

    def parse_expr(self) -> Expr | None:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        if left is None:
            return None

        while self.current.kind in _ADDITIVE:
            op_tok = self.advance()
            right = self.parse_term()
            if right is None:
                return left
            node = self._binary(op_tok, _ADDITIVE[op_tok.kind], left, right)
            if node is None:
                return left
            left = node

        return left

    def parse_term(self) -> Expr | None:
        """number (('*' | '/') number)*"""
        left = self.parse_number()
        if left is None:
            return None

        while self.current.kind in _MULTIPLICATIVE:
            op_tok = self.advance()
            right = self.parse_number()
            if right is None:
                return left
            node = self._binary(op_tok, _MULTIPLICATIVE[op_tok.kind], left, right)
            if node is None:
                return left
            left = node

        return left

    def parse_number(self) -> NumberLiteral | None:
        """NUMBER"""
        tok = self.current
        if tok.kind != TokenKind.NUMBER:
            self.fail(ExpectedNumberError, tok)
            return None

        self.advance()

        try:
            value = float(tok.text)
        except ValueError:
            self.fail(InvalidNumberError, tok)
            return None

        try:
            return NumberLiteral(value=value)
        except MemoryError:
            self.fail(AllocationFailureError, tok)
            return None

    def _binary(self, op_tok: Token, op: BinaryOp, left: Expr, right: Expr) -> BinaryExpr | None:
        try:
            return BinaryExpr(op=op, left=left, right=right, pos=op_tok.start)
        except MemoryError:
            self.fail(AllocationFailureError, op_tok)
            return None


def parse(source: str) -> ParseResult:
    """Parse one line into a tree, collecting the first error instead of raising.

    Args:
        source: A single input line without its trailing newline.

    Returns:
        ParseResult carrying the best-effort tree and the first error, if any.
    """
    parser = _Parser(Lexer(source))
    expr = parser.parse_start()
    return ParseResult(expr=expr, error=parser.error)


def parse_line(source: str) -> Expr:
    """Parse one line into a complete tree.

    Args:
        source: Expression string (e.g., "1 + 2 * 3")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: The first error met while parsing the line.
    """
    return parse(source).unwrap()
