"""
calcline Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    NumberLiteral,
    count_nodes,
    iter_nodes,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "NumberLiteral",
    "count_nodes",
    "iter_nodes",
]
