"""
Indented tree dump for parsed expressions.

Debugging aid. Walks nodes in the same order the evaluator does: operator
first, then the left subtree, then the right, each one level deeper.
"""

from __future__ import annotations

import sys
from typing import TextIO

from calcline.core.ir.expressions import BinaryExpr, Expr, NumberLiteral

INDENT = "  "


def format_number(value: float, spec: str = "g") -> str:
    """Render a float the way results are shown (``%g`` by default)."""
    return format(value, spec)


def format_tree(expr: Expr, number_format: str = "g") -> str:
    """Return the tree as text, one node per line."""
    lines: list[str] = []
    stack: list[tuple[Expr, int]] = [(expr, 0)]

    while stack:
        node, depth = stack.pop()
        pad = INDENT * depth
        if isinstance(node, NumberLiteral):
            lines.append(pad + format_number(node.value, number_format))
        elif isinstance(node, BinaryExpr):
            lines.append(pad + node.op.value)
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        else:
            raise AssertionError(f"unreachable: unknown expression type {type(node).__name__}")

    return "\n".join(lines)


def print_tree(expr: Expr, stream: TextIO | None = None, number_format: str = "g") -> None:
    """Write the tree to a stream (stdout by default)."""
    out = stream or sys.stdout
    out.write(format_tree(expr, number_format) + "\n")
