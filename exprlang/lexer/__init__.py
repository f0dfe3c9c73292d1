"""
exprlang Lexer Package

Character-level tokenizer for the exprlang notation.

Key Features:
- Comment-line stripping and per-line trimming before lexing
- Three-state scanner (plain text / number / string)
- Longest-match recognition of punctuation and operators
- Source locations into the original text for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, Source, SourceLocation, BASE_TOKEN_IDS, END_TOKEN
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Source",
    "SourceLocation",
    "BASE_TOKEN_IDS",
    "END_TOKEN",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
