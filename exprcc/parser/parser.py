"""
exprcc Recursive Descent Parser

Each precedence level is one method that calls the next tighter-binding
level before looking for its own operators:

    expr       = equality
    equality   = relational ("==" relational | "!=" relational)*
    relational = add ("<" add | "<=" add | ">" add | ">=" add)*
    add        = mul ("+" mul | "-" mul)*
    mul        = unary ("*" unary | "/" unary)*
    unary      = ("+" | "-")? primary
    primary    = "(" expr ")" | num

Repeated operators at one level fold left, so `8-3-2` is `(8-3)-2`.
`a > b` is built as `b < a` and `a >= b` as `b <= a`; unary minus is
built as `0 - x`.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Node, Num, BinaryOp, NodeKind, SourceSpan, join_spans
from .errors import (
    create_expected_token_error, create_expected_number_error,
    create_trailing_token_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

# Deepest parenthesized nesting; each level adds one frame per grammar layer
MAX_NESTING_DEPTH = 100


class Parser:
    """
    exprcc recursive descent parser.

    A parser instance owns its cursor (`current`) and is good for a single
    parse session. It is not safe to share one instance between threads;
    independent parses should each use their own parser.
    """

    def __init__(self, tokens: List[Token], max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, terminated by an EOF token
            max_depth: Deepest parenthesized nesting accepted
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.current = 0
        self.max_depth = max_depth
        self.depth = 0

    def parse(self) -> Node:
        """
        Parse one expression starting at the cursor.

        Does not require that every token is consumed; callers that need
        that guarantee check `at_end()` afterwards.

        Returns:
            Root node of the expression tree

        Raises:
            ParseError: On the first syntax error
        """
        node = self._parse_expression()
        logger.debug("parsed expression %s, cursor at token %d", node, self.current)
        return node

    # Grammar layers, lowest to highest precedence

    def _parse_expression(self) -> Node:
        return self._parse_equality()

    def _parse_equality(self) -> Node:
        node = self._parse_relational()

        while True:
            if self.consume("=="):
                node = self._binary(NodeKind.EQUAL, node, self._parse_relational())
            elif self.consume("!="):
                node = self._binary(NodeKind.NOT_EQUAL, node, self._parse_relational())
            else:
                return node

    def _parse_relational(self) -> Node:
        node = self._parse_additive()

        # `<=`/`>=` are tried before `<`/`>`
        while True:
            if self.consume("<="):
                node = self._binary(NodeKind.LESS_OR_EQUAL, node, self._parse_additive())
            elif self.consume(">="):
                node = self._binary(NodeKind.LESS_OR_EQUAL, self._parse_additive(), node)
            elif self.consume("<"):
                node = self._binary(NodeKind.LESS_THAN, node, self._parse_additive())
            elif self.consume(">"):
                node = self._binary(NodeKind.LESS_THAN, self._parse_additive(), node)
            else:
                return node

    def _parse_additive(self) -> Node:
        node = self._parse_multiplicative()

        while True:
            if self.consume("+"):
                node = self._binary(NodeKind.ADD, node, self._parse_multiplicative())
            elif self.consume("-"):
                node = self._binary(NodeKind.SUB, node, self._parse_multiplicative())
            else:
                return node

    def _parse_multiplicative(self) -> Node:
        node = self._parse_unary()

        while True:
            if self.consume("*"):
                node = self._binary(NodeKind.MUL, node, self._parse_unary())
            elif self.consume("/"):
                node = self._binary(NodeKind.DIV, node, self._parse_unary())
            else:
                return node

    def _parse_unary(self) -> Node:
        """Parse at most one prefix sign, then a primary."""
        sign = self._peek()
        if self.consume("+"):
            operand = self._parse_primary()
            return self._widen(operand, sign)

        if self.consume("-"):
            zero = Num(0, SourceSpan(sign.location, sign.end_location))
            return self._binary(NodeKind.SUB, zero, self._parse_primary())

        return self._parse_primary()

    def _parse_primary(self) -> Node:
        """Parse a parenthesized expression or an integer literal."""
        token = self._peek()
        if self.consume("("):
            if self.depth >= self.max_depth:
                raise create_nesting_too_deep_error(token, self.max_depth)
            self.depth += 1
            node = self._parse_expression()
            close = self.expect(")")
            self.depth -= 1
            return self._widen(node, token, close)

        value = self.expect_number()
        return Num(value, SourceSpan(token.location, token.end_location))

    @staticmethod
    def _widen(node: Node, first: Token, last: Optional[Token] = None) -> Node:
        """Stretch a node's span to start at `first` and, if given, end after `last`."""
        if node.span is None:
            return node
        end = last.end_location if last is not None else node.span.end
        return replace(node, span=SourceSpan(first.location, end))

    def _binary(self, kind: NodeKind, left: Node, right: Node) -> BinaryOp:
        return BinaryOp(kind, left, right, join_spans(left, right))

    # Token matching primitives

    def peek_is(self, op: str) -> bool:
        """Check whether the current token is exactly the operator `op`."""
        token = self._peek()
        return token.is_operator and token.lexeme == op

    def consume(self, op: str) -> bool:
        """Advance past the current token if it is `op`; report whether it was."""
        if not self.peek_is(op):
            return False
        self.current += 1
        return True

    def expect(self, op: str) -> Token:
        """
        Consume the operator `op` or fail.

        Returns:
            The consumed token

        Raises:
            ParseError: If the current token is not `op`
        """
        token = self._peek()
        if not self.consume(op):
            raise create_expected_token_error(op, token)
        return token

    def expect_number(self) -> int:
        """
        Consume an integer literal and return its value.

        Raises:
            ParseError: If the current token is not a number
        """
        token = self._peek()
        if not token.is_number:
            raise create_expected_number_error(token)
        self.current += 1
        return token.value

    def at_end(self) -> bool:
        """Check whether the cursor sits on the EOF token."""
        return self._peek().is_eof

    @property
    def current_token(self) -> Token:
        return self._peek()

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]


def parse(tokens: List[Token]) -> Node:
    """
    Parse an expression from a token list with a fresh parser.

    Leftover tokens after the expression are not an error here.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()


def parse_complete(tokens: List[Token]) -> Node:
    """
    Parse a token list that must hold exactly one expression.

    Raises:
        ParseError: If parsing fails or tokens remain after the expression
    """
    parser = Parser(tokens)
    node = parser.parse()
    if not parser.at_end():
        raise create_trailing_token_error(parser.current_token)
    return node


def parse_string(source: str, filename: str = "<string>") -> Node:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Root node of the expression tree

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails or input remains after the expression
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return parse_complete(tokens)
