"""
Abstract Syntax Tree node definitions for exprcc.

The tree is a closed set of two immutable node shapes: `Num` for integer
literals and `BinaryOp` for every two-operand operator. Each node carries a
`NodeKind` tag so consumers can dispatch on `node.kind` exhaustively.

Nodes compare structurally; the optional source span is ignored by
equality so trees built from different token streams can be compared.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from ..lexer.tokens import SourceLocation


class NodeKind(Enum):
    """Enumeration of all AST node kinds."""

    NUM = "Num"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    LESS_THAN = "LessThan"
    LESS_OR_EQUAL = "LessOrEqual"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"


BINARY_KINDS = frozenset(kind for kind in NodeKind if kind is not NodeKind.NUM)


@dataclass(frozen=True)
class SourceSpan:
    """
    Represents a span of source code.

    `start` is the first character of the span and `end` the position just
    past its last character, so `end.offset - start.offset` is its length.
    """
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class Num:
    """Integer literal."""
    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.NUM

    def children(self) -> List['Node']:
        return []

    def __str__(self) -> str:
        return f"Num({self.value})"


@dataclass(frozen=True)
class BinaryOp:
    """Two-operand operation; `kind` selects the operator."""
    kind: NodeKind
    left: 'Node'
    right: 'Node'
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.kind not in BINARY_KINDS:
            raise ValueError(f"{self.kind} is not a binary node kind")
        if self.left is None or self.right is None:
            raise ValueError(f"{self.kind.value} node requires both operands")

    def children(self) -> List['Node']:
        return [self.left, self.right]

    def __str__(self) -> str:
        rendered: List[str] = []
        for node in walk(self):
            if isinstance(node, Num):
                rendered.append(str(node))
            else:
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(f"{node.kind.value}({left}, {right})")
        return rendered[0]


Node = Union[Num, BinaryOp]


def join_spans(left: Node, right: Node) -> Optional[SourceSpan]:
    """Span covering two sibling nodes, if both carry one."""
    if left.span is None or right.span is None:
        return None
    start = min(left.span.start, right.span.start, key=lambda loc: loc.offset)
    end = max(left.span.end, right.span.end, key=lambda loc: loc.offset)
    return SourceSpan(start, end)


def walk(node: Node) -> Iterator[Node]:
    """
    Yield every node of the tree in post-order (children before parent).

    Uses an explicit stack, so operator chains of any length can be walked.
    """
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded or isinstance(current, Num):
            yield current
            continue
        stack.append((current, True))
        stack.append((current.right, False))
        stack.append((current.left, False))


def format_tree(node: Node, indent: str = "  ") -> str:
    """Render the tree one node per line, children indented under parents."""
    lines = []
    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, Num):
            lines.append(f"{indent * level}Num {current.value}")
            continue
        lines.append(f"{indent * level}{current.kind.value}")
        stack.append((current.right, level + 1))
        stack.append((current.left, level + 1))
    return "\n".join(lines)


# Alias for the root AST type
AST = Node
