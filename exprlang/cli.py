#!/usr/bin/env python3
"""
exprlang command line front end
===============================

Parses a source file (or a string given with -c) and prints the resulting
tree.

Usage:
    exprlang [options] [FILE]

Options:
    -c SOURCE         Parse SOURCE instead of a file
    --tokens          Print the token stream before the tree
    --json            Print the tree as JSON
    --strict          Report truncated parses as errors
    --trace           Log tokens and parse steps at DEBUG level
    --comment-marker  Line comment marker (default '#')
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import SyntaxConfig
from .parser import Parser, ParseError, NodeRenderer, to_dict

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprlang",
        description="Tokenize and parse exprlang source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprlang script.ex                 # Print the tree of a file
    exprlang -c "out(1, 2)" --tokens   # Tokens and tree of a string
    exprlang -c "x = 1" --json         # Tree as JSON
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to parse')
    parser.add_argument('-c', dest='source', metavar='SOURCE',
                        help='Parse SOURCE instead of a file')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream before the tree')
    parser.add_argument('--json', action='store_true',
                        help='Print the tree as JSON')
    parser.add_argument('--strict', action='store_true',
                        help='Report truncated parses as errors')
    parser.add_argument('--trace', action='store_true',
                        help='Log tokens and parse steps at DEBUG level')
    parser.add_argument('--comment-marker', default='#',
                        help="Line comment marker (default '#')")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source is None and args.file is None:
        print("error: a FILE or -c SOURCE is required", file=sys.stderr)
        return 2

    if args.source is not None:
        source, filename = args.source, "<string>"
    else:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
            return 2
        filename = args.file

    try:
        config = SyntaxConfig(
            comment_marker=args.comment_marker,
            strict=args.strict,
            trace=args.trace,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    parser = Parser(source, filename, config)

    if args.tokens:
        for token in parser.tokens:
            print(token)

    try:
        nodes = parser.parse()
    except ParseError as e:
        print(e, file=sys.stderr, end="")
        return 1

    logger.debug("parsed %d top-level nodes", len(nodes))

    if args.json:
        print(json.dumps([to_dict(node) for node in nodes], indent=2))
    else:
        renderer = NodeRenderer()
        for node in nodes:
            print(renderer.render(node))

    return 0


if __name__ == "__main__":
    sys.exit(main())
