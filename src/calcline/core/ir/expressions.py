"""
Expression types for the calcline IR.

A parsed line is a strict tree of two node kinds:
- Numeric leaves: 42
- Binary operations: left + right, left - right, left * right, left / right

Nodes are frozen and each BinaryExpr exclusively owns its children.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal, always held as a float."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.value:g}"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr
    pos: int = Field(default=0, description="Source offset of the operator token")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | BinaryExpr

# Rebuild for the recursive forward reference
BinaryExpr.model_rebuild()


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def iter_nodes(expr: Expr) -> Iterator[Expr]:
    """Yield every node of the tree, parent before children, left before right."""
    stack: list[Expr] = [expr]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, BinaryExpr):
            stack.append(node.right)
            stack.append(node.left)


def count_nodes(expr: Expr | None) -> int:
    """Number of nodes in a tree; 0 for no tree."""
    if expr is None:
        return 0
    return sum(1 for _ in iter_nodes(expr))
