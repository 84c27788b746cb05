#!/usr/bin/env python3
"""
Command line token dump for calcexpr expressions.

Usage:
    calcexpr-tokens "1 + 2 * nvl<abs<x>, 0>"
    calcexpr-tokens -f expression.txt --json
"""

import argparse
import logging
import sys

from . import __version__
from .lexer import Tokenizer, LexerError, render

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(threadName)s] %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
    )


def dump_tokens(expression: str, as_json: bool = False) -> str:
    """Tokenize an expression and return the text to print."""
    tokenizer = Tokenizer(expression)
    if as_json:
        return tokenizer.to_json(indent=2)
    return render(tokenizer)


def main(argv=None) -> int:
    """Main entry point for the calcexpr CLI."""
    parser = argparse.ArgumentParser(
        prog="calcexpr-tokens",
        description="Tokenize a calculator expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "1 + 2"                  # Rendered token stream
  %(prog)s --json "nvl<x, 0>"       # Tokenizer state as JSON
  %(prog)s -f expression.txt        # Read the expression from a file
        """
    )

    parser.add_argument(
        'expression',
        nargs='?',
        help='Expression to tokenize'
    )

    parser.add_argument(
        '-f', '--file',
        help='Read the expression from a file'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the tokenizer state as JSON'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log function grouping steps'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'calcexpr {__version__}'
    )

    args = parser.parse_args(argv)
    configure_logging(args.debug)

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                expression = f.read().strip()
        except OSError as e:
            print(f"Cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.expression is not None:
        expression = args.expression
    else:
        parser.error("an expression or --file is required")

    try:
        print(dump_tokens(expression, as_json=args.json))
    except LexerError as e:
        print(e, file=sys.stderr, end="")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
