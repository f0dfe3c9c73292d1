"""
Error handling for the exprlang parser.

The parser has no error recovery: the first ParseError ends the parse and
propagates to the caller carrying the offending token.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
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
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P004": "Unclosed function call",
    "P005": "Parsing stopped before end of input",
}


def create_unclosed_call_error(found: Token) -> ParseError:
    """Create an error for a call whose argument list is not followed by ')'."""
    return ParseError(
        message=f"Expected ')', found {found.value} instead.",
        location=found.location,
        token=found,
        code="P004",
        help_text="A function call's arguments must be closed with ')' or '}'.",
        suggestions=["Add a closing ')'", "Separate arguments with ','"]
    )


def create_truncation_error(found: Token) -> ParseError:
    """Create an error for input left over when an expression could not start."""
    return ParseError(
        message=f"Unexpected token {found.type.value} '{found.value}', parsing stopped",
        location=found.location,
        token=found,
        code="P005",
        help_text="An expression must start with an item, a literal or '('.",
        suggestions=["Check for a dangling operator", "Check for an unmatched ')'"]
    )
