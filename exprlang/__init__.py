"""
exprlang Front End Package

Lexer and parser for a small expression-oriented scripting notation.
Source text is stripped of comment lines, tokenized, and parsed into a tree
of Leaf, Binary and ListNode values. Nothing is evaluated.

Architecture:
    exprlang/
    ├── lexer/           # Tokenization
    ├── parser/          # AST construction
    ├── config.py        # SyntaxConfig
    └── cli.py           # Command line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from typing import List, Optional

from .config import SyntaxConfig, DEFAULT_CONFIG
from .lexer import Lexer, Token, TokenType, Source
from .parser import Parser, ParseError, ASTNode


def lex(source_text: str, config: Optional[SyntaxConfig] = None) -> List[Token]:
    """Tokenize source text."""
    return Lexer(source_text, config=config).tokenize()


def parse(source_text: str, config: Optional[SyntaxConfig] = None) -> List[ASTNode]:
    """Parse source text into top-level AST nodes."""
    return Parser(source_text, config=config).parse()


__all__ = [
    "lex",
    "parse",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Source",
    "ASTNode",
    "ParseError",
    "SyntaxConfig",
    "DEFAULT_CONFIG",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
