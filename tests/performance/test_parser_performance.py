#!/usr/bin/env python3
"""
Parser Performance Test Suite
=============================

Checks that lexing and parsing stay linear on long inputs and that the
iterative operator loops do not grow the call stack for long chains.
"""

import pytest
import time
import sys
import os
from dataclasses import dataclass

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exprcc.lexer import tokenize_string
from exprcc.parser import Parser, NodeKind, Num


@dataclass
class PerformanceTarget:
    """Time budget for an input of a given operand count"""
    operands: int
    max_time_ms: float


class TestParserPerformance:
    """
    Performance checks for the lexer and parser.
    """

    PERFORMANCE_TARGETS = [
        PerformanceTarget(1_000, 250.0),
        PerformanceTarget(10_000, 2500.0),
    ]

    @staticmethod
    def _chain(operands: int, operator: str = "+") -> str:
        return operator.join(["1"] * operands)

    @staticmethod
    def _left_spine_length(node) -> int:
        length = 0
        while not isinstance(node, Num):
            length += 1
            node = node.left
        return length

    @pytest.mark.parametrize("target", PERFORMANCE_TARGETS, ids=lambda t: f"{t.operands}-operands")
    def test_long_chain_within_budget(self, target):
        source = self._chain(target.operands)

        start = time.perf_counter()
        tokens = tokenize_string(source)
        parser = Parser(tokens)
        tree = parser.parse()
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert parser.at_end()
        assert elapsed_ms < target.max_time_ms, (
            f"{target.operands} operands took {elapsed_ms:.1f}ms "
            f"(budget {target.max_time_ms}ms)"
        )
        assert self._left_spine_length(tree) == target.operands - 1

    def test_long_chain_exceeds_recursion_limit(self):
        operands = sys.getrecursionlimit() * 2
        tree = Parser(tokenize_string(self._chain(operands, "*"))).parse()

        assert tree.kind == NodeKind.MUL
        assert self._left_spine_length(tree) == operands - 1

    def test_token_count_scales_with_input(self):
        tokens = tokenize_string(self._chain(5_000, "<"))
        assert len(tokens) == 5_000 * 2
