"""
Front-end configuration for exprlang.

Author: xwest
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SyntaxConfig:
    """Configuration parameters shared by the lexer and parser"""

    # Source preprocessing
    comment_marker: str = "#"

    # String literal delimiters (either one opens, only the same one closes)
    quote_chars: Tuple[str, ...] = ("'", '"')

    # Report truncated parses as ParseError instead of an END leaf
    strict: bool = False

    # Debug tracing of tokens and parse steps
    trace: bool = False

    def __post_init__(self):
        if not self.comment_marker or self.comment_marker.isspace():
            raise ValueError("comment_marker must be a non-blank string")
        if not self.quote_chars:
            raise ValueError("at least one quote character is required")
        for quote in self.quote_chars:
            if len(quote) != 1:
                raise ValueError(f"quote characters must be single characters, got {quote!r}")


DEFAULT_CONFIG = SyntaxConfig()
