"""
calcline expression language.

Tokenizer, parser, evaluator, and tree printer for single-line arithmetic.

Usage:
    from calcline.core.expression_lang import parse_line, evaluate

    expr = parse_line("1 + 2 * 3")
    result = evaluate(expr)
    # result == 7.0
"""

from calcline.core.expression_lang.evaluator import evaluate
from calcline.core.expression_lang.parser import ParseResult, parse, parse_line
from calcline.core.expression_lang.printer import format_number, format_tree, print_tree

__all__ = [
    "ParseResult",
    "evaluate",
    "format_number",
    "format_tree",
    "parse",
    "parse_line",
    "print_tree",
]
