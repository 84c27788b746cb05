"""
Error handling for the calcexpr lexer.

Provides error reporting with the offending character, its offset in the
expression, and a hint on what to type instead.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    position: int  # Character offset into the expression
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.position}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot continue.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharError(LexerError):
    """A character that no token rule accepts."""

    def __init__(self, char: str, position: int, **kwargs):
        super().__init__(f"Unexpected character: '{char}'", position, **kwargs)
        self.char = char
        self.position = position

    def __repr__(self) -> str:
        return f"UnexpectedCharError({self.char!r}, {self.position})"


# Look-alikes people paste in from documents
ASCII_ALTERNATIVES = {
    '×': ['*'],
    '·': ['*'],
    '⋅': ['*'],
    '÷': ['/'],
    '−': ['-'],
    '≤': ['<'],
    '≥': ['>'],
    '，': [','],
    '（': ['('],
    '）': [')'],
}


def suggest_ascii_alternatives(char: str) -> List[str]:
    """Suggest ASCII replacements for typographic characters."""
    return ASCII_ALTERNATIVES.get(char, [])


def create_unexpected_char_error(char: str, position: int) -> UnexpectedCharError:
    """Create an error for a character no token rule accepts."""
    suggestions = suggest_ascii_alternatives(char)

    if suggestions:
        help_text = f"Did you mean {', '.join(repr(s) for s in suggestions)}?"
    elif char == '.':
        help_text = "Only whole numbers are supported."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharError(
        char,
        position,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )
