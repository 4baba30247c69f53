"""
exprcc Lexer - turns expression source text into a token list.

Whitespace is skipped, decimal integers become NUMBER tokens and the
fixed operator set becomes RESERVED tokens. Multi-character operators are
always emitted as a single token.
"""

import logging
import re
from typing import List

from .tokens import Token, TokenType, SourceLocation, MULTI_CHAR_OPERATORS, SINGLE_CHAR_OPERATORS
from .errors import create_invalid_character_error

logger = logging.getLogger(__name__)


class Lexer:
    """
    exprcc lexical analyzer.

    Converts source code text into a list of tokens terminated by an EOF
    token. Stops at the first character that cannot start a token.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.decimal_pattern = re.compile(r'[0-9]+')
        self.whitespace_pattern = re.compile(r'[ \t\r\n]+')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token

        Raises:
            LexerError: On the first character that does not start a token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while True:
            self._skip_whitespace()
            if self.pos >= len(self.source):
                break
            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))

        logger.debug("tokenized %s into %d tokens", self.filename, len(self.tokens))
        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        location = self._location()
        current_char = self.source[self.pos]

        if '0' <= current_char <= '9':
            return self._tokenize_number(location)

        # Operators (multi-character first)
        for operator in MULTI_CHAR_OPERATORS:
            if self.source.startswith(operator, self.pos):
                self._advance_by(len(operator))
                return Token(TokenType.RESERVED, operator, None, location)

        if current_char in SINGLE_CHAR_OPERATORS:
            self._advance()
            return Token(TokenType.RESERVED, current_char, None, location)

        raise create_invalid_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a decimal integer literal."""
        match = self.decimal_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self._advance_by(len(lexeme))
        return Token(TokenType.NUMBER, lexeme, int(lexeme), location)

    def _skip_whitespace(self):
        """Skip spaces, tabs and newlines."""
        match = self.whitespace_pattern.match(self.source, self.pos)
        if match:
            self._advance_by(len(match.group(0)))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, tracking line and column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
