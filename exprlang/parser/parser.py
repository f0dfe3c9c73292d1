"""
exprlang Recursive Descent Parser

Builds a tree of Leaf / Binary / ListNode from the lexer's token list.
Operators form a flat right-associative chain with no precedence levels;
parentheses group without producing a node of their own.

Author: xwest
"""

import logging
from typing import List, Optional, Union

from ..config import SyntaxConfig, DEFAULT_CONFIG
from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType, Source, END_TOKEN
from .ast_nodes import ASTNode, Data, Leaf, Binary, ListNode
from .errors import create_unclosed_call_error, create_truncation_error

logger = logging.getLogger(__name__)

FUNC_DATA = Data("FUNC", "FUNC")
ITEM_CHAIN_DATA = Data("ITEM", "ITEM")


class Parser:
    """
    exprlang recursive descent parser.

    The parser owns a lexer: the source is tokenized once, eagerly, when the
    parser is constructed, and parse() walks the resulting list with a cursor.
    """

    def __init__(self, source: Union[str, Source], filename: str = "<string>",
                 config: Optional[SyntaxConfig] = None):
        """
        Initialize parser with program source.

        Args:
            source: Source text or Source wrapper
            filename: Filename for diagnostics
            config: Syntax configuration, defaults to DEFAULT_CONFIG
        """
        self.config = config or DEFAULT_CONFIG
        self.lexer = Lexer(source, filename, self.config)
        self.tokens: List[Token] = self.lexer.tokenize()
        self.pos = 0
        self.truncated = False

    def parse(self) -> List[ASTNode]:
        """
        Parse the token list into top-level expressions.

        Expressions are parsed until the tokens run out; ';' terminators
        between them are skipped. If an expression cannot start at the
        cursor, at the top level or nested inside another expression, an
        END leaf takes its place and parsing stops after the enclosing
        top-level node.

        Returns:
            Top-level nodes in source order

        Raises:
            ParseError: On an unclosed function call, or on any truncated
                parse when the config is strict
        """
        self.pos = 0
        self.truncated = False
        nodes: List[ASTNode] = []

        if self.config.trace:
            for token in self.tokens:
                logger.debug("token %s", token)

        while True:
            self._skip_terminators()
            if self._current().is_end:
                break

            node = self.parse_expr()
            nodes.append(node)
            if self.truncated:
                if self.config.trace:
                    logger.debug("parsing stopped at token %d of %d", self.pos, len(self.tokens))
                break

        return nodes

    def parse_expr(self) -> ASTNode:
        """Parse one expression starting at the cursor."""
        current = self._current()
        if self.config.trace:
            logger.debug("parse_expr %s", current)

        if current.type == TokenType.ITEM:
            following = self._next()
            if following.type == TokenType.OPEN_PAREN:
                return self._parse_call()
            if following.is_operator:
                self.pos += 2
                return Binary(ITEM_CHAIN_DATA, self._leaf(current), self.parse_expr())
            self.pos += 1
            return self._leaf(self._previous())

        if current.type == TokenType.OPEN_PAREN:
            return self._parse_group()

        if current.is_literal:
            following = self._next()
            if following.is_operator:
                self.pos += 2
                tag = following.type.value
                return Binary(Data(tag, tag), self._leaf(current), self.parse_expr())
            self.pos += 1
            return self._leaf(self._previous())

        if not current.is_end:
            if self.config.strict:
                raise create_truncation_error(current)
            self.truncated = True
        return Leaf.end()

    def parse_func_args(self) -> ListNode:
        """Parse comma separated arguments up to (not including) the closing symbol."""
        arguments: List[ASTNode] = []

        while self._current().type not in (TokenType.CLOS_PAREN, TokenType.END):
            arguments.append(self.parse_expr())
            if self._current().type == TokenType.SYMB_COMMA:
                self.pos += 1
                continue
            break

        return ListNode(tuple(arguments))

    def _parse_call(self) -> Binary:
        """Parse `name(args)`; the cursor is on the name."""
        name = self._current()
        self.pos += 2  # name and opening symbol

        arguments = self.parse_func_args()

        closing = self._current()
        if closing.type == TokenType.CLOS_PAREN:
            self.pos += 1
        elif not closing.is_end:
            raise create_unclosed_call_error(closing)
        # Running out of tokens is accepted as closing the call

        return Binary(FUNC_DATA, self._leaf(name), arguments)

    def _parse_group(self) -> ASTNode:
        """Parse `( expr )` and return the inner expression."""
        self.pos += 1
        inner = self.parse_expr()
        if self._current().type == TokenType.CLOS_PAREN:
            self.pos += 1
        return inner

    def _leaf(self, token: Token) -> Leaf:
        tag = token.type.value
        return Leaf(Data(tag, token.value), tag)

    def _skip_terminators(self):
        while self._current().type == TokenType.CLOS_EXPRN:
            self.pos += 1

    # Cursor accessors; out of range yields the synthetic END token

    def _previous(self) -> Token:
        if 0 < self.pos <= len(self.tokens):
            return self.tokens[self.pos - 1]
        return END_TOKEN

    def _current(self) -> Token:
        if 0 <= self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return END_TOKEN

    def _next(self) -> Token:
        if 0 <= self.pos + 1 < len(self.tokens):
            return self.tokens[self.pos + 1]
        return END_TOKEN


def parse_string(source: str, filename: str = "<string>",
                 config: Optional[SyntaxConfig] = None) -> List[ASTNode]:
    """
    Convenience function to parse a source string.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(source, filename, config).parse()


def parse_file(filepath: str, config: Optional[SyntaxConfig] = None) -> List[ASTNode]:
    """
    Convenience function to parse a source file.

    Raises:
        ParseError: If parsing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath, config)
