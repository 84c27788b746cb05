"""
calcexpr Lexer Package

Implements the tokenizer for calculator expressions with generic
function-call syntax such as ``nvl<abs<x - 1>, 0>``.

Key Features:
- Exact decimal number literals
- Function calls grouped into a single token with pre-tokenized arguments
- Tolerant handling of unmatched closing brackets inside arguments
- Operator precedence table for expression parsers
- JSON export of tokenizer state for tooling

Author: xwest
"""

from .tokens import Token, TokenType, FunctionCall, OperatorPrecedence, render, to_source
from .lexer import Tokenizer, TokenStream, tokenize, tokenize_file
from .nesting import NestingCounters
from .errors import LexerError, UnexpectedCharError

__all__ = [
    "Tokenizer",
    "TokenStream",
    "Token",
    "TokenType",
    "FunctionCall",
    "OperatorPrecedence",
    "NestingCounters",
    "LexerError",
    "UnexpectedCharError",
    "tokenize",
    "tokenize_file",
    "render",
    "to_source",
]
