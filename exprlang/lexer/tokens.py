"""
Token definitions for the exprlang lexer.

This module defines the token categories, the symbol table used to recognise
punctuation and operators, and the Source wrapper that prepares raw program
text for lexing.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


# Every operator category starts with this prefix; the parser relies on it
OPERATOR_PREFIX = "OPER_"


class TokenType(Enum):
    """
    Enumeration of all token categories in exprlang.

    The values are the symbolic category strings used in diagnostics and as
    tags on the AST.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END = "END"                                 # End of token stream (synthetic)

    # ========================================================================
    # Items and Literals
    # ========================================================================
    ITEM = "ITEM"                               # x, print, args.name
    NUMBER_LIT = "NUMBER_LIT"                   # 42, 3.14
    STRING_LIT = "STRING_LIT"                   # 'hello', "hello"

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    SYMB_COMMA = "SYMB_COMMA"                   # ,
    OPEN_PAREN = "OPEN_PAREN"                   # ( {
    CLOS_PAREN = "CLOS_PAREN"                   # ) }
    CLOS_EXPRN = "CLOS_EXPRN"                   # ;
    SYMB_BSLSH = "SYMB_BSLSH"                   # \

    # ========================================================================
    # Operators
    # ========================================================================

    # Assignment
    OPER_EQUAL = "OPER_EQUAL"                   # =

    # Arithmetic
    OPER_ADDTN = "OPER_ADDTN"                   # +
    OPER_MINUS = "OPER_MINUS"                   # -
    OPER_MULTI = "OPER_MULTI"                   # *
    OPER_MODUL = "OPER_MODUL"                   # %
    OPER_FSLSH = "OPER_FSLSH"                   # /

    # Comparison
    OPER_IS_EQUAL = "OPER_IS_EQUAL"             # ==
    OPER_IS_NEQUAL = "OPER_IS_NEQUAL"           # !=
    OPER_IS_MORE_EQUAL = "OPER_IS_MORE_EQUAL"   # >=
    OPER_IS_LESS_EQUAL = "OPER_IS_LESS_EQUAL"   # <=
    OPER_IS_MORE = "OPER_IS_MORE"               # >
    OPER_IS_LESS = "OPER_IS_LESS"               # <

    # Logical
    OPER_OR = "OPER_OR"                         # ||
    OPER_AND = "OPER_AND"                       # &&

    @property
    def is_operator(self) -> bool:
        return self.value.startswith(OPERATOR_PREFIX)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the original (unstripped) source text.

    Used for error reporting and diagnostics.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token: a category plus the raw text that produced it.

    The location is informational only and does not take part in equality,
    so tokens from different runs of the same text compare equal.
    """
    type: TokenType
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        tag = self.type.value
        return f"<{tag}>{self.value}</{tag}>"

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator (category starts with OPER_)."""
        return self.type.is_operator

    @property
    def is_literal(self) -> bool:
        """Check if this token is a number or string literal."""
        return self.type in (TokenType.NUMBER_LIT, TokenType.STRING_LIT)

    @property
    def is_end(self) -> bool:
        return self.type == TokenType.END


# Returned by the parser's cursor accessors whenever it looks out of range
END_TOKEN = Token(TokenType.END, "END")


# Symbol table. Multi-character entries are matched before single-character
# ones by the lexer (maximal munch).
BASE_TOKEN_IDS: Dict[str, TokenType] = {
    # Punctuation
    ",": TokenType.SYMB_COMMA,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOS_PAREN,
    "{": TokenType.OPEN_PAREN,
    "}": TokenType.CLOS_PAREN,
    ";": TokenType.CLOS_EXPRN,
    "\\": TokenType.SYMB_BSLSH,

    # Assignment
    "=": TokenType.OPER_EQUAL,

    # Arithmetic
    "+": TokenType.OPER_ADDTN,
    "-": TokenType.OPER_MINUS,
    "*": TokenType.OPER_MULTI,
    "%": TokenType.OPER_MODUL,
    "/": TokenType.OPER_FSLSH,

    # Comparison
    "==": TokenType.OPER_IS_EQUAL,
    "!=": TokenType.OPER_IS_NEQUAL,
    ">=": TokenType.OPER_IS_MORE_EQUAL,
    "<=": TokenType.OPER_IS_LESS_EQUAL,
    ">": TokenType.OPER_IS_MORE,
    "<": TokenType.OPER_IS_LESS,

    # Logical
    "||": TokenType.OPER_OR,
    "&&": TokenType.OPER_AND,
}

# Characters that only ever appear inside a composed operator (|| and &&).
# When no table entry matches at their position they are dropped.
COMPOSITION_CHARS = frozenset("|&")

# Longest symbol in the table, used to bound the maximal-munch lookahead
MAX_SYMBOL_LENGTH = max(len(symbol) for symbol in BASE_TOKEN_IDS)


class Source:
    """
    Owned program text.

    Comment lines are removed and surviving lines are trimmed before lexing.
    """

    def __init__(self, contents: str, filename: str = "<string>", comment_marker: str = "#"):
        self.contents = contents
        self.filename = filename
        self.comment_marker = comment_marker

    def strip_comments(self) -> str:
        """Return the text with comment lines removed and every line trimmed."""
        return self.stripped()[0]

    def stripped(self) -> Tuple[str, List[SourceLocation]]:
        """
        Strip the source and map every character back to the original text.

        Returns:
            (stripped text, location of each character of the stripped text)
        """
        lines: List[str] = []
        locations: List[SourceLocation] = []
        line_end: Optional[SourceLocation] = None

        for line_number, line in enumerate(self.contents.split("\n"), start=1):
            trimmed = line.strip()
            if trimmed.startswith(self.comment_marker):
                continue

            if line_end is not None:
                # The joining newline sits just past the end of the previous line
                locations.append(line_end)

            first_column = len(line) - len(line.lstrip()) + 1
            for offset in range(len(trimmed)):
                locations.append(SourceLocation(self.filename, line_number, first_column + offset))
            lines.append(trimmed)
            line_end = SourceLocation(self.filename, line_number, first_column + len(trimmed))

        return "\n".join(lines), locations

    def __repr__(self) -> str:
        return f"Source({self.filename!r}, {len(self.contents)} chars)"
