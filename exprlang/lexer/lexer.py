"""
exprlang Lexer - turns stripped source text into a flat list of tokens

Single forward pass with three buffering states: plain text, inside a
number, inside a string. Punctuation and operators are looked up in
BASE_TOKEN_IDS, longest match first.

xwest
"""

import logging
from typing import List, Optional, Union

from ..config import SyntaxConfig, DEFAULT_CONFIG
from .tokens import (
    Token, TokenType, Source, SourceLocation, BASE_TOKEN_IDS,
    COMPOSITION_CHARS, MAX_SYMBOL_LENGTH
)
from .errors import LexerWarning, create_unterminated_string_warning

logger = logging.getLogger(__name__)

ASCII_DIGITS = frozenset("0123456789")


class Lexer:
    """
    exprlang lexical analyzer.

    Converts comment-stripped source text into an ordered list of tokens.
    The lexer never raises: malformed input degrades into whatever tokens
    the state machine produces, and unterminated strings are reported as
    warnings.
    """

    def __init__(self, source: Union[str, Source], filename: str = "<string>",
                 config: Optional[SyntaxConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text, or an already constructed Source
            filename: Name of source file for diagnostics (ignored for Source)
            config: Syntax configuration, defaults to DEFAULT_CONFIG
        """
        self.config = config or DEFAULT_CONFIG
        if isinstance(source, Source):
            self.source = source
        else:
            self.source = Source(source, filename, self.config.comment_marker)

        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []
        self._reset()

    def _reset(self):
        self.text = ""
        self.locations: List[SourceLocation] = []
        self.pos = 0

        # Scanner state
        self.buffer = ""
        self.buffer_start = 0
        self.in_string = False
        self.string_quote = ""
        self.in_number = False

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens in source order (no trailing END token)
        """
        self.tokens = []
        self.warnings = []
        self._reset()
        self.text, self.locations = self.source.stripped()

        while self.pos < len(self.text):
            self.pos += self._scan(self.text[self.pos])

        self._finish()

        if self.config.trace:
            logger.debug("lexed %d tokens from %s", len(self.tokens), self.source.filename)
        return self.tokens

    def get_tokens(self) -> List[Token]:
        """Tokens produced by the last call to tokenize()."""
        return self.tokens

    def _scan(self, char: str) -> int:
        """Process the character at the cursor, returning how many characters were consumed."""
        if self.in_string:
            if char == self.string_quote:
                self.in_string = False
                self._emit_buffer(TokenType.STRING_LIT)
            else:
                self.buffer += char
            return 1

        if self.in_number:
            if char in ASCII_DIGITS or char == ".":
                self.buffer += char
                return 1
            # The number ends here; the character itself is handled below
            self.in_number = False
            self._emit_buffer(TokenType.NUMBER_LIT)

        if char in ASCII_DIGITS and not self.buffer:
            self.in_number = True
            self._start_buffer(char)
            return 1

        if char in self.config.quote_chars:
            self._flush_item()
            self.in_string = True
            self.string_quote = char
            self._start_buffer("")
            return 1

        if char.isspace():
            self._flush_item()
            return 1

        symbol = self._match_symbol()
        if symbol is not None:
            self._flush_item()
            self._emit(BASE_TOKEN_IDS[symbol], symbol, self.pos)
            return len(symbol)

        if char in COMPOSITION_CHARS:
            # Half of a || or && with no partner
            self._flush_item()
            return 1

        if not self.buffer:
            self.buffer_start = self.pos
        self.buffer += char
        return 1

    def _match_symbol(self) -> Optional[str]:
        """Find the longest symbol table entry starting at the cursor."""
        for length in range(MAX_SYMBOL_LENGTH, 0, -1):
            candidate = self.text[self.pos:self.pos + length]
            if len(candidate) == length and candidate in BASE_TOKEN_IDS:
                return candidate
        return None

    def _finish(self):
        """Flush whatever is still buffered at end of input."""
        if self.in_number:
            self.in_number = False
            self._emit_buffer(TokenType.NUMBER_LIT)
        elif self.in_string:
            self.in_string = False
            warning = create_unterminated_string_warning(
                self.string_quote, self._location_at(self.buffer_start - 1)
            )
            self.warnings.append(warning)
            logger.warning("unterminated string literal at %s", warning.diagnostic.location)
            self._emit_buffer(TokenType.STRING_LIT)
        else:
            self._flush_item()

    def _start_buffer(self, initial: str):
        self.buffer = initial
        self.buffer_start = self.pos if initial else self.pos + 1

    def _flush_item(self):
        """Emit the pending buffer as an ITEM if it holds anything."""
        item = self.buffer.strip()
        if item:
            self._emit(TokenType.ITEM, item, self.buffer_start)
        self.buffer = ""

    def _emit_buffer(self, token_type: TokenType):
        # Literal locations point at the opening quote / first digit
        start = self.buffer_start - 1 if token_type == TokenType.STRING_LIT else self.buffer_start
        self._emit(token_type, self.buffer, start)
        self.buffer = ""

    def _emit(self, token_type: TokenType, value: str, start: int):
        self.tokens.append(Token(token_type, value, self._location_at(start)))

    def _location_at(self, index: int) -> Optional[SourceLocation]:
        if 0 <= index < len(self.locations):
            return self.locations[index]
        return None

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[LexerWarning]:
        """Get all diagnostics."""
        return list(self.warnings)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[SyntaxConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics
        config: Optional syntax configuration

    Returns:
        List of tokens
    """
    return Lexer(source, filename, config).tokenize()


def tokenize_file(filepath: str, config: Optional[SyntaxConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, config)
