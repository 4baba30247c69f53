"""
Compilation pipeline for exprcc.

Runs source text through the lexer, the parser and the x86-64 backend.
Errors from any phase propagate unchanged to the caller.
"""

import logging
from typing import List

from .lexer import Token, tokenize_string
from .parser import Node, parse_complete, format_tree
from .backend import X86CodeGenerator

logger = logging.getLogger(__name__)

EMIT_FORMATS = ("asm", "ast", "tokens")


def format_tokens(tokens: List[Token]) -> str:
    """One token per line with its location."""
    return "\n".join(f"{token.location}\t{token}" for token in tokens)


def compile_tree(source: str, filename: str = "<string>") -> Node:
    """
    Tokenize and parse `source`, requiring a single complete expression.

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails or input remains after the expression
    """
    tokens = tokenize_string(source, filename)
    logger.info("lexed %s: %d tokens", filename, len(tokens))

    tree = parse_complete(tokens)
    logger.info("parsed %s", filename)
    return tree


def compile_string(source: str, filename: str = "<string>", emit: str = "asm") -> str:
    """
    Compile a source string.

    Args:
        source: Expression source text
        filename: Filename for error reporting
        emit: "asm" for assembly, "ast" for an indented tree dump,
            "tokens" for the token list

    Returns:
        The requested output as text

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
        ValueError: If `emit` is not a known format
    """
    if emit not in EMIT_FORMATS:
        raise ValueError(f"unknown output format {emit!r}, expected one of {', '.join(EMIT_FORMATS)}")

    if emit == "tokens":
        return format_tokens(tokenize_string(source, filename)) + "\n"

    tree = compile_tree(source, filename)
    if emit == "ast":
        return format_tree(tree) + "\n"

    assembly = X86CodeGenerator().generate(tree)
    logger.info("generated assembly for %s", filename)
    return assembly


def compile_file(filepath: str, emit: str = "asm") -> str:
    """
    Compile a source file.

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return compile_string(source, filepath, emit)
