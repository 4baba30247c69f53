"""
Token definitions for the exprcc lexer.

The expression language only needs three kinds of token: reserved operators
(punctuation such as `+` or `<=`), integer literals, and the end-of-input
marker that terminates every token list.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types in exprcc."""

    RESERVED = auto()               # +, -, *, /, (, ), <, <=, >, >=, ==, !=
    NUMBER = auto()                 # 42
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting; `offset` is the character offset from the
    start of the source and is what the caret renderer points at.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value and source
    location. Only NUMBER tokens carry a value.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[int]            # Parsed integer for NUMBER tokens
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.RESERVED

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF

    @property
    def end_location(self) -> SourceLocation:
        """Location just past the last character of the token."""
        width = len(self.lexeme)
        loc = self.location
        return SourceLocation(loc.filename, loc.line, loc.column + width, loc.offset + width)

    def describe(self) -> str:
        """Short human-readable description used in diagnostics."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"


# Operator spellings, longest first so the lexer never splits `<=` into `<` `=`
MULTI_CHAR_OPERATORS = ("==", "!=", "<=", ">=")
SINGLE_CHAR_OPERATORS = ("+", "-", "*", "/", "(", ")", "<", ">")


def make_token(token_type: TokenType, lexeme: str, value: Any = None,
               filename: str = "<tokens>", offset: int = 0) -> Token:
    """
    Build a token on a single line without running the lexer.

    Handy for feeding the parser a hand-built token stream.
    """
    return Token(token_type, lexeme, value, SourceLocation(filename, 1, offset + 1, offset))
