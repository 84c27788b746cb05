"""
calcexpr Package

Lexical analysis for calculator expressions extended with a generic
function-call syntax, ``name<arg1, arg2, ...>``.

Architecture:
    calcexpr/
    ├── lexer/           # Tokenization and function-call grouping
    └── cli.py           # Token dump command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import (
    Tokenizer,
    TokenStream,
    Token,
    TokenType,
    OperatorPrecedence,
    UnexpectedCharError,
    tokenize,
)

__all__ = [
    # Core classes
    "Tokenizer",
    "TokenStream",
    "Token",
    "TokenType",
    "OperatorPrecedence",
    "UnexpectedCharError",
    "tokenize",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
