"""
exprlang Parser Package

Recursive descent parser producing a small, strictly owned AST.

Key Features:
- Function calls with comma separated argument lists
- Flat right-associative operator chains
- Transparent parenthesised grouping
- Optional strict mode that reports truncated parses

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTVisitor, NodeKind, Data, Leaf, Binary, ListNode,
    NodeRenderer, NodeSerializer, to_dict,
)
from .parser import Parser, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNode", "ASTVisitor", "NodeKind", "Data",
    "Leaf", "Binary", "ListNode",
    "NodeRenderer", "NodeSerializer", "to_dict",

    # Error handling
    "ParseError",
]
