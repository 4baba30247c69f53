"""
Error handling for the exprcc lexer.

Provides the shared `Diagnostic` record used by every compiler phase and
the caret renderer that points at the failing token in the source text.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single compiler diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    def render(self, source: str) -> str:
        """
        Render the diagnostic against the source it was produced from.

        The offending source line is printed with a caret under the
        character at `location.offset`, followed by the message.

        Args:
            source: The full source text the location refers to

        Returns:
            Multi-line string ready to be written to stderr
        """
        offset = min(max(self.location.offset, 0), len(source))
        line_start = source.rfind("\n", 0, offset) + 1
        line_end = source.find("\n", offset)
        if line_end == -1:
            line_end = len(source)

        line_text = source[line_start:line_end]
        # Tabs copied from the line, every other character becomes a space
        caret_prefix = "".join(
            char if char == "\t" else " " for char in line_text[:offset - line_start]
        )

        code = f"[{self.code}]" if self.code else ""
        result = f"{self.severity.upper()}{code}: {self.message}\n"
        result += f"  --> {self.location}\n"
        result += f"{line_text}\n"
        result += f"{caret_prefix}^ {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a character it cannot tokenize.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


LEXER_ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that does not start any token."""
    if char.isalpha() or char == "_":
        suggestions = ["Identifiers are not supported; only integer literals may appear"]
    elif char == "=":
        suggestions = ["Use '==' for comparison"]
    elif char == "!":
        suggestions = ["Use '!=' for not equal"]
    else:
        suggestions = []

    return LexerError(
        message="invalid token",
        location=location,
        code="L001",
        help_text=f"The character {char!r} cannot start a token.",
        suggestions=suggestions
    )
