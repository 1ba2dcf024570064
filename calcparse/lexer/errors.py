"""
Error handling for the calcparse lexer.

Provides error reporting with source location information and
suggestions. The Diagnostic record defined here is shared by the parser
and evaluator error types.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, OPERATORS


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix = f"{severity_prefix}[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a character it cannot
    tokenize.
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
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common ASCII look-alikes and the operator they were probably meant to be
OPERATOR_ALTERNATIVES = {
    '×': '*',
    '·': '*',
    '÷': '/',
    '−': '-',
    '–': '-',
    '[': '(',
    ']': ')',
    '{': '(',
    '}': ')',
}


def suggest_operator_corrections(char: str) -> List[str]:
    """Suggest a supported operator for a look-alike character."""
    replacement = OPERATOR_ALTERNATIVES.get(char)
    if replacement is None:
        return []
    return [f"Use '{replacement}' instead of '{char}'"]


LEXER_ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    supported = " ".join(OPERATORS)
    return LexerError(
        message=f"Invalid character '{char}'",
        location=location,
        code="L001",
        help_text=f"Only decimal integers, whitespace and {supported} are allowed.",
        suggestions=suggest_operator_corrections(char)
    )
