"""
exprcc Compiler Package

A small from-scratch compiler for integer arithmetic and comparison
expressions. Source text is tokenized, parsed by a recursive descent
precedence cascade into an AST, and lowered to x86-64 assembly.

Architecture:
    exprcc/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── backend/         # Native code generation
    ├── driver.py        # Source-to-assembly pipeline
    └── cli.py           # `exprcc` console command
"""

from ._version import __version__

from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError
from .parser import Parser, ParseError, parse, parse_string
from .backend import X86CodeGenerator
from .driver import compile_string, compile_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "X86CodeGenerator",

    # Data model
    "Token",
    "TokenType",
    "SourceLocation",

    # Pipeline
    "parse",
    "parse_string",
    "compile_string",
    "compile_file",

    # Errors
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
]
