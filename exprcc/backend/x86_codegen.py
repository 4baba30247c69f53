"""
x86-64 Backend for exprcc.

Lowers an expression tree to Intel-syntax assembly for a stack machine:
every node leaves its value on the hardware stack, and binary nodes pop
their two operands into rax/rdi, combine them, and push the result. The
emitted `main` returns the value of the expression as its exit status.
"""

import logging
from typing import Dict, List

from ..parser.ast_nodes import Node, Num, BinaryOp, NodeKind

logger = logging.getLogger(__name__)


ARITHMETIC_INSTRUCTIONS: Dict[NodeKind, List[str]] = {
    NodeKind.ADD: ["add rax, rdi"],
    NodeKind.SUB: ["sub rax, rdi"],
    NodeKind.MUL: ["imul rax, rdi"],
    NodeKind.DIV: ["cqo", "idiv rdi"],
}

COMPARISON_SET_INSTRUCTIONS: Dict[NodeKind, str] = {
    NodeKind.EQUAL: "sete",
    NodeKind.NOT_EQUAL: "setne",
    NodeKind.LESS_THAN: "setl",
    NodeKind.LESS_OR_EQUAL: "setle",
}


class X86CodeGenerator:
    """
    Generates x86-64 assembly from an exprcc AST.

    Every node kind is handled; an unknown kind is a programming error and
    raises ValueError.
    """

    def __init__(self, entry_symbol: str = "main"):
        """
        Args:
            entry_symbol: Name of the global function the code is emitted into
        """
        self.entry_symbol = entry_symbol

    def generate(self, node: Node) -> str:
        """
        Generate a complete assembly listing for an expression.

        Args:
            node: Root of the expression tree

        Returns:
            Assembly text ending with a newline
        """
        lines = [
            ".intel_syntax noprefix",
            f".global {self.entry_symbol}",
            f"{self.entry_symbol}:",
        ]
        lines.extend(self._emit(instruction) for instruction in self.generate_lines(node))
        lines.append(self._emit("pop rax"))
        lines.append(self._emit("ret"))

        logger.debug("generated %d lines of assembly", len(lines))
        return "\n".join(lines) + "\n"

    def generate_lines(self, node: Node) -> List[str]:
        """Instructions (without indentation) that push the value of `node`."""
        instructions: List[str] = []
        self._generate_node(node, instructions)
        return instructions

    def _generate_node(self, node: Node, out: List[str]):
        # Post-order over an explicit stack; a binary node is emitted once
        # both operands have been pushed.
        stack = [(node, False)]
        while stack:
            current, operands_done = stack.pop()
            if isinstance(current, Num):
                out.append(f"push {current.value}")
            elif operands_done:
                self._generate_binary(current, out)
            else:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))

    def _generate_binary(self, node: BinaryOp, out: List[str]):
        out.append("pop rdi")
        out.append("pop rax")

        if node.kind in ARITHMETIC_INSTRUCTIONS:
            out.extend(ARITHMETIC_INSTRUCTIONS[node.kind])
        elif node.kind in COMPARISON_SET_INSTRUCTIONS:
            out.append("cmp rax, rdi")
            out.append(f"{COMPARISON_SET_INSTRUCTIONS[node.kind]} al")
            out.append("movzb rax, al")
        else:
            raise ValueError(f"no code generation rule for {node.kind}")

        out.append("push rax")

    @staticmethod
    def _emit(instruction: str) -> str:
        return f"\t{instruction}"
