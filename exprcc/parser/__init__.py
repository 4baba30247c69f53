"""
exprcc Parser Package

Implements a recursive descent parser for exprcc expressions. Produces
immutable, structurally comparable AST nodes with source spans.

Key Features:
- One method per precedence level, left-associative folding
- `>`/`>=` normalized to `<`/`<=` with swapped operands
- Unary minus lowered to subtraction from zero
- First syntax error aborts the parse with a located ParseError
"""

from .ast_nodes import (
    AST, Node, NodeKind, Num, BinaryOp, SourceSpan, walk, format_tree
)
from .parser import Parser, parse, parse_complete, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_complete",
    "parse_string",

    # AST nodes
    "AST", "Node", "NodeKind", "Num", "BinaryOp", "SourceSpan",
    "walk", "format_tree",

    # Error handling
    "ParseError",
]
