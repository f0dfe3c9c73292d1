"""
Diagnostics for the exprlang lexer.

The lexer is total: it never fails on any input. Suspicious input such as an
unterminated string literal is reported as a warning that does not stop
tokenization.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for front-end diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
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


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


LEXER_WARNING_CODES = {
    "L001": "Unterminated string literal",
}


def create_unterminated_string_warning(quote: str, location: Optional[SourceLocation]) -> LexerWarning:
    """Create a warning for a string literal closed by end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L001",
        help_text=f"The literal was closed at end of input; it should end with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote"]
    )
