"""
exprcc Lexer Package

Implements the lexical analyzer (tokenizer) for the exprcc expression
language: integer literals, the arithmetic and comparison operators, and
parentheses.

Key Features:
- Multi-character operators emitted as single tokens
- Source location tracking (line, column, offset) for caret diagnostics
- Shared Diagnostic record used by the later phases
"""

from .tokens import Token, TokenType, SourceLocation, make_token
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "make_token",
    "tokenize_string",
    "tokenize_file",
]
