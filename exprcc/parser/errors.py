"""
Error handling for the exprcc parser.

A single exception kind, `ParseError`, reports every syntax error. It wraps
the shared `Diagnostic` so the offending token's position can be rendered
with a caret under it.
"""

from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    The first error aborts the whole parse; no partial tree is returned.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P002": "Expected a number",
    "P003": "Unexpected token after expression",
    "P004": "Parentheses nested too deeply",
}


def create_expected_token_error(expected: str, found: Token) -> ParseError:
    """Create an error for a missing reserved operator such as ')'."""
    suggestions = []
    if expected == ")":
        suggestions.append("Add a closing parenthesis ')'")

    return ParseError(
        message=f"expected '{expected}', found {found.describe()}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see '{expected}' at this position.",
        suggestions=suggestions
    )


def create_expected_number_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start a primary expression."""
    return ParseError(
        message=f"expected a number, found {found.describe()}",
        location=found.location,
        token=found,
        code="P002",
        help_text="An operand must be an integer literal or a parenthesized expression.",
        suggestions=["Ensure all operators have operands"]
    )


def create_trailing_token_error(found: Token) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        message=f"unexpected token {found.describe()} after expression",
        location=found.location,
        token=found,
        code="P003",
        help_text="The input must contain exactly one expression.",
        suggestions=["Check for an unbalanced ')' or a missing operator"]
    )


def create_nesting_too_deep_error(found: Token, limit: int) -> ParseError:
    """Create an error for parentheses nested past the parser's depth limit."""
    return ParseError(
        message=f"expression nested too deeply (more than {limit} levels of parentheses)",
        location=found.location,
        token=found,
        code="P004",
        help_text="Split the expression or remove redundant parentheses.",
    )
